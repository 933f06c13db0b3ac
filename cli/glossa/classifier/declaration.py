import ast
from typing import List, Optional, Protocol, Sequence


class Annotated(Protocol):
    def annotation_names(self) -> Sequence[str]: ...


class Documented(Protocol):
    def doc_comment(self) -> Optional[str]: ...


class Named(Protocol):
    def simple_name(self) -> str: ...


def decorator_name(node: ast.expr) -> Optional[str]:
    """Simple name of a decorator expression, e.g. ``GlossaryTerm`` for
    ``@pkg.marker.GlossaryTerm()``."""
    if isinstance(node, ast.Call):
        return decorator_name(node.func)
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return node.attr
    return None


class ClassDefNode:
    """All three facets of a class definition parsed by ``ast``."""

    def __init__(self, node: ast.ClassDef, path: Optional[str] = None):
        self.node = node
        self.path = path

    def annotation_names(self) -> List[str]:
        names = (decorator_name(d) for d in self.node.decorator_list)
        return [n for n in names if n]

    def doc_comment(self) -> Optional[str]:
        return ast.get_docstring(self.node, clean=False)

    def simple_name(self) -> str:
        return self.node.name

    def location(self) -> Optional[str]:
        if self.path is None:
            return None
        return f"{self.path}:{self.node.lineno}"


class Declaration:
    def __init__(self, annotated: Annotated, documented: Documented, named: Named):
        for facet, value in (("annotated", annotated), ("documented", documented), ("named", named)):
            if value is None:
                raise TypeError(f"{facet} facet must not be None")
        self.annotated = annotated
        self.documented = documented
        self.named = named

    @classmethod
    def from_class_def(cls, node: ast.ClassDef, path: Optional[str] = None) -> "Declaration":
        facets = ClassDefNode(node, path)
        return cls(facets, facets, facets)

    def has_annotation(self, name: str) -> bool:
        return name in self.annotated.annotation_names()

    def doc_comment(self) -> Optional[str]:
        return self.documented.doc_comment()

    def name(self) -> str:
        return self.named.simple_name()

    def location(self) -> Optional[str]:
        """``path:line`` when the named facet knows where it was declared."""
        locate = getattr(self.named, "location", None)
        return locate() if callable(locate) else None

    def __repr__(self) -> str:
        return f"Declaration({self.name()!r})"
