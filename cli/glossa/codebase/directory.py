import fnmatch
import pathlib
from typing import Iterable, List

from cli.glossa.errors import SourceRootError


def _is_code_file(path: pathlib.Path) -> bool:
    return path.suffix == ".py" and not any(part.startswith(".") for part in path.parts)


class Directory:
    """Python source files below a root directory."""

    def __init__(self, root, recursive: bool = True, exclude: Iterable[str] = ()):
        self.root = pathlib.Path(root)
        self.recursive = recursive
        self.exclude = list(exclude)

    def _excluded(self, rel: pathlib.Path) -> bool:
        text = rel.as_posix()
        for pattern in self.exclude:
            if fnmatch.fnmatch(text, pattern):
                return True
            if any(fnmatch.fnmatch(part, pattern) for part in rel.parts):
                return True
        return False

    def files(self) -> List[pathlib.Path]:
        if not self.root.exists():
            raise SourceRootError(str(self.root), "does not exist")
        if not self.root.is_dir():
            raise SourceRootError(str(self.root))
        candidates = self.root.rglob("*.py") if self.recursive else self.root.glob("*.py")
        out = []
        for path in candidates:
            rel = path.relative_to(self.root)
            if path.is_file() and _is_code_file(rel) and not self._excluded(rel):
                out.append(path)
        return sorted(out)
