from cli.glossa.marker import GlossaryTerm


@GlossaryTerm
class Book:
    """A title held by the library, independent of how many copies exist.

    :param isbn: the book's ISBN
    """

    def __init__(self, isbn: str):
        self.isbn = isbn


@GlossaryTerm
class Copy:
    """One physical item of a book that can be lent out."""


class Shelf:
    """Where copies are stored. Not a domain term."""
