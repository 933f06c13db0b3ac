import re
from typing import Callable, Dict, List

from cli.glossa.classifier.definition import Definition

ORDERS = ("term", "source")
LAYOUTS = ("text", "markdown")

MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_\[\]<>])")


def _by_term(defs: List[Definition]) -> List[Definition]:
    # sorted() is stable, so equal terms keep their input order
    return sorted(defs, key=lambda d: (d.term.casefold(), d.term))


def _entry(head: str, description: str, prefix: str) -> str:
    lines = description.splitlines()
    if not lines:
        return head
    rest = [prefix + line if line else line for line in lines[1:]]
    return "\n".join([f"{head} {lines[0]}"] + rest)


def _text(defs: List[Definition]) -> str:
    if not defs:
        return ""
    entries = [_entry(f"{d.term}:", d.description, "    ") for d in defs]
    return "\n\n".join(entries) + "\n"


def _md_escape(text: str) -> str:
    return MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)


def _markdown(defs: List[Definition]) -> str:
    md = ["# Glossary"]
    if defs:
        md.append("")
    for d in defs:
        md.append(_entry(f"- **{_md_escape(d.term)}**:", _md_escape(d.description), "  "))
    return "\n".join(md) + "\n"


LAYOUT_RENDERERS: Dict[str, Callable[[List[Definition]], str]] = {
    "text": _text,
    "markdown": _markdown,
}


class FormattedGlossary:
    """Glossary rendered as one block of text.

    ``order="term"`` sorts entries alphabetically by term (case-insensitive,
    ties broken by the exact term, then by input order). ``order="source"``
    keeps the order in which the definitions were received. Duplicate terms
    are never merged.
    """

    def __init__(self, definitions, order: str = "term", layout: str = "text"):
        if definitions is None:
            raise TypeError("definitions must not be None")
        if order not in ORDERS:
            raise ValueError(f"Unknown order '{order}', expected one of {', '.join(ORDERS)}")
        if layout not in LAYOUTS:
            raise ValueError(f"Unknown layout '{layout}', expected one of {', '.join(LAYOUTS)}")
        self.definitions = definitions
        self.order = order
        self.layout = layout

    def _received(self) -> List[Definition]:
        source = self.definitions
        if hasattr(source, "definitions"):
            source = source.definitions()
        return list(source)

    def formatted(self) -> str:
        defs = self._received()
        if self.order == "term":
            defs = _by_term(defs)
        return LAYOUT_RENDERERS[self.layout](defs)
