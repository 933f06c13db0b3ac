from dataclasses import dataclass

from cli.glossa import marker


@marker.GlossaryTerm
@dataclass
class Loan:
    """A copy lent to a member until its due date.

    Attributes:
        due: the date the copy must be returned
    """

    due: str


@marker.GlossaryTerm
class Member:
    pass
