def GlossaryTerm(cls=None):
    """Mark a class as glossary term.

    The decorator has no runtime effect. The scanner looks for it by name in
    the source, so ``@GlossaryTerm``, ``@marker.GlossaryTerm`` and
    ``@GlossaryTerm()`` all count.
    """
    if cls is None:
        return GlossaryTerm
    return cls
