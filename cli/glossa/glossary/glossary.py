from typing import Iterator

from cli.glossa.classifier.classifier import MARKER, Classifier
from cli.glossa.classifier.definition import Definition
from cli.glossa.codebase.codebase import Codebase
from cli.glossa.marker import GlossaryTerm


@GlossaryTerm
class CodebaseGlossary:
    """The definitions of all glossary terms in a codebase, in codebase order.

    Nothing is cached: each call walks the codebase again.
    """

    def __init__(self, codebase: Codebase, marker: str = MARKER):
        if codebase is None:
            raise TypeError("codebase must not be None")
        self.codebase = codebase
        self.marker = marker

    def classifiers(self) -> Iterator[Classifier]:
        for classifier in self.codebase.classifiers(self.marker):
            if classifier.has_glossary_term_annotation():
                yield classifier

    def definitions(self) -> Iterator[Definition]:
        for classifier in self.classifiers():
            yield classifier.definition()
