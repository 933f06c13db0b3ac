import logging
import pathlib
from typing import List, Optional

from cli.glossa.classifier.classifier import MARKER, Classifier
from cli.glossa.codebase.codebase import Codebase
from cli.glossa.codebase.directory import Directory
from cli.glossa.errors import MissingDescriptionError
from cli.glossa.glossary.formatted import FormattedGlossary
from cli.glossa.glossary.glossary import CodebaseGlossary
from cli.glossa.report.destination import Destination
from cli.glossa.report.timing import TimedRun

logger = logging.getLogger(__name__)


class PrintableGlossary:
    """Generate a glossary from a source tree and print it.

    Progress lines go to ``info``, the formatted glossary goes to ``target``
    (``info`` as well when no target is given). The glossary text is only
    written once it is complete, so a failing run leaves ``target``
    untouched.
    """

    def __init__(
        self,
        directory: Directory,
        info: Destination,
        target: Optional[Destination] = None,
        marker: str = MARKER,
        order: str = "term",
        layout: str = "text",
        strict: bool = False,
    ):
        if directory is None:
            raise TypeError("directory must not be None")
        if info is None:
            raise TypeError("info must not be None")
        self.directory = directory
        self.info = info
        self.target = target if target is not None else info
        self.marker = marker
        self.order = order
        self.layout = layout
        self.strict = strict

    def _undocumented(self, classifiers: List[Classifier]) -> List[str]:
        missing = []
        for classifier in classifiers:
            if not classifier.has_documentation():
                name = classifier.declaration.name()
                where = classifier.declaration.location() or name
                logger.warning("Glossary term %s has no docstring (%s)", name, where)
                missing.append(name)
        return missing

    def _build(self, files: List[pathlib.Path]) -> None:
        glossary = CodebaseGlossary(Codebase(self.directory, files), self.marker)
        classifiers = list(glossary.classifiers())
        missing = self._undocumented(classifiers)
        if missing and self.strict:
            raise MissingDescriptionError(missing)
        definitions = [c.definition() for c in classifiers]
        text = FormattedGlossary(definitions, order=self.order, layout=self.layout).formatted()
        self.target.write(text)

    def print(self) -> int:
        """Run once and return the elapsed whole seconds."""
        files = self.directory.files()
        self.info.write(f"Scanning {len(files)} python files for @{self.marker} decorator")
        seconds = TimedRun(lambda: self._build(files)).seconds()
        self.info.write(f"Finished in: {seconds}s")
        return seconds
