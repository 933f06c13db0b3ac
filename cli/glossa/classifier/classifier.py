from cli.glossa.classifier import docstring
from cli.glossa.classifier.declaration import Declaration
from cli.glossa.classifier.definition import DESCRIPTION_NOT_FOUND, Definition
from cli.glossa.marker import GlossaryTerm

MARKER = GlossaryTerm.__name__


def is_glossary_term(declaration: Declaration, marker: str = MARKER) -> bool:
    return declaration.has_annotation(marker)


@GlossaryTerm
class Classifier:
    """A class declared in a Python source file.

    Whether it is a glossary term and whether it is documented are separate
    questions; ``definition`` answers neither and always builds a definition.
    """

    def __init__(self, declaration: Declaration, marker: str = MARKER):
        if declaration is None:
            raise TypeError("declaration must not be None")
        self.declaration = declaration
        self.marker = marker

    def has_glossary_term_annotation(self) -> bool:
        return is_glossary_term(self.declaration, self.marker)

    def has_documentation(self) -> bool:
        return self.declaration.doc_comment() is not None

    def definition(self) -> Definition:
        term = self.declaration.name()
        raw = self.declaration.doc_comment()
        if raw is None:
            return Definition(term, DESCRIPTION_NOT_FOUND)
        return Definition(term, docstring.parse(raw).description)
