import ast
import logging
import pathlib
from typing import Iterator, List, Optional

from cli.glossa.classifier.classifier import MARKER, Classifier
from cli.glossa.classifier.declaration import Declaration
from cli.glossa.codebase.directory import Directory
from cli.glossa.errors import UnparsableSourceError
from cli.glossa.marker import GlossaryTerm

logger = logging.getLogger(__name__)


def parse_file(path: pathlib.Path) -> ast.Module:
    # bytes, so BOMs and coding cookies are honoured
    try:
        return ast.parse(path.read_bytes(), filename=str(path))
    except SyntaxError as e:
        raise UnparsableSourceError(str(path), e.msg or "invalid syntax", e.lineno) from e
    except ValueError as e:
        raise UnparsableSourceError(str(path), str(e)) from e


def class_declarations(tree: ast.Module, path: Optional[str] = None) -> List[Declaration]:
    found: List[Declaration] = []

    class Visitor(ast.NodeVisitor):
        def visit_ClassDef(self, node: ast.ClassDef):
            found.append(Declaration.from_class_def(node, path))
            self.generic_visit(node)

    Visitor().visit(tree)
    return found


@GlossaryTerm
class Codebase:
    """Every class declared in the source files of a directory.

    With ``files`` given, that list is scanned instead of listing the
    directory again.
    """

    def __init__(self, directory: Directory, files: Optional[List[pathlib.Path]] = None):
        if directory is None:
            raise TypeError("directory must not be None")
        self.directory = directory
        self.files = files

    def _files(self) -> List[pathlib.Path]:
        return self.files if self.files is not None else self.directory.files()

    def declarations(self) -> Iterator[Declaration]:
        for path in self._files():
            tree = parse_file(path)
            found = class_declarations(tree, path.as_posix())
            logger.debug("Parsed %s: %d class declarations", path, len(found))
            yield from found

    def classifiers(self, marker: str = MARKER) -> Iterator[Classifier]:
        for declaration in self.declarations():
            yield Classifier(declaration, marker)
