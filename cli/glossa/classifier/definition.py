from dataclasses import dataclass

from cli.glossa.marker import GlossaryTerm

DESCRIPTION_NOT_FOUND = "Description not found"


@GlossaryTerm
@dataclass(frozen=True)
class Definition:
    """The term of a glossary entry together with its description."""

    term: str
    description: str
