from typing import List, Optional


class GlossaError(Exception):
    """Base class for errors that abort a glossary run."""


class SourceRootError(GlossaError):
    def __init__(self, root: str, reason: str = "is not a directory"):
        self.root = root
        super().__init__(f"Source root '{root}' {reason}")


class UnparsableSourceError(GlossaError):
    def __init__(self, path: str, reason: str, line: Optional[int] = None):
        self.path = path
        self.reason = reason
        self.line = line
        where = f"{path}:{line}" if line else path
        super().__init__(f"Cannot parse {where}: {reason}")


class MissingDescriptionError(GlossaError):
    def __init__(self, terms: List[str]):
        self.terms = list(terms)
        super().__init__("Glossary terms without docstring: " + ", ".join(self.terms))


class ConfigError(GlossaError):
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))
