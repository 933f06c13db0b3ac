"""Split a class docstring into its description and its block tags.

The description is the free text up to the first tag line. Recognised tag
lines are reST fields (``:param x: ...``), Javadoc style tags
(``@since 0.1``), Google style section headers (``Args:``) and NumPy style
section headers (``Returns`` underlined with dashes).
"""
import inspect
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

FIELD_RE = re.compile(r"^:(?P<name>[A-Za-z_][\w ]*?)(?:\s+(?P<arg>[^:]+))?:\s*(?P<value>.*)$")
AT_TAG_RE = re.compile(r"^@(?P<name>[A-Za-z]\w*)\b\s*(?P<value>.*)$")
UNDERLINE_RE = re.compile(r"^-{3,}\s*$")

SECTIONS = {
    "args",
    "arguments",
    "attributes",
    "example",
    "examples",
    "keyword args",
    "keyword arguments",
    "methods",
    "note",
    "notes",
    "other parameters",
    "parameters",
    "raises",
    "references",
    "return",
    "returns",
    "see also",
    "todo",
    "warning",
    "warnings",
    "warns",
    "yield",
    "yields",
}


@dataclass(frozen=True)
class Tag:
    name: str
    value: str = ""


@dataclass(frozen=True)
class DocBlock:
    description: str
    tags: List[Tag] = field(default_factory=list)


def _tag_at(lines: List[str], i: int) -> Optional[Tuple[Tag, int]]:
    """Return the tag starting at line ``i`` and the number of header lines."""
    line = lines[i].strip()
    m = FIELD_RE.match(line)
    if m:
        name = m.group("name").strip()
        if m.group("arg"):
            name = f"{name} {m.group('arg').strip()}"
        return Tag(name, m.group("value").strip()), 1
    m = AT_TAG_RE.match(line)
    if m:
        return Tag(m.group("name"), m.group("value").strip()), 1
    if line.endswith(":") and line[:-1].strip().lower() in SECTIONS:
        return Tag(line[:-1].strip()), 1
    nxt = lines[i + 1].strip() if i + 1 < len(lines) else ""
    if line.lower() in SECTIONS and UNDERLINE_RE.match(nxt):
        return Tag(line), 2
    return None


def parse(raw: str) -> DocBlock:
    lines = inspect.cleandoc(raw).splitlines()
    description: List[str] = []
    tags: List[Tag] = []
    body: List[str] = []
    current: Optional[Tag] = None
    i = 0
    while i < len(lines):
        found = _tag_at(lines, i)
        if found is not None:
            if current is not None:
                tags.append(_with_body(current, body))
            current, skip = found
            body = []
            i += skip
            continue
        if current is None:
            description.append(lines[i])
        else:
            body.append(lines[i].strip())
        i += 1
    if current is not None:
        tags.append(_with_body(current, body))
    return DocBlock("\n".join(description).strip(), tags)


def _with_body(tag: Tag, body: List[str]) -> Tag:
    text = " ".join(part for part in [tag.value, *body] if part)
    return Tag(tag.name, text)
