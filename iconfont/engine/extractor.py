"""Shape extraction: recovers viewBox, path literals and circles from icon module text.

Icon modules are generated JavaScript, not SVG. Shapes appear as object
literals passed to primitive constructors::

    (0, _jsxRuntime.jsx)(_primitives.Path, {
      fillRule: "evenodd",
      d: "M5 5h14v14H5z",
      clipRule: "evenodd"
    })

Paths are found by their ``d`` literal, circles by a ``Circle`` primitive call
whose argument object carries ``cx``, ``cy`` and ``r``. Each path keeps its
source offset and the span of its enclosing object literal so style
attributes can be associated with it afterwards.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from iconfont.errors import NoShapes, NoViewBox
from iconfont.models.icon import CircleShape

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r'viewBox\s*:\s*"([^"]+)"')
# "d" must be a standalone key, so "id:" and "fxd:" don't count
_PATH_D_RE = re.compile(r'(?<![\w$])d\s*:\s*"([^"]+)"')
# Circle primitive reference followed by its props object
_CIRCLE_CALL_RE = re.compile(r'(?<![\w$])(?:[\w$]+\.)?Circle\s*,\s*(?=\{)')
_CIRCLE_ATTR_RE = re.compile(
    r'(?<![\w$-])(cx|cy|r)\s*:\s*(?:"([^"]*)"|\'([^\']*)\'|([-+]?[\d.]+(?:[eE][-+]?\d+)?))'
)

_QUOTES = "\"'`"


@dataclass
class PathOccurrence:
    """A ``d`` literal found in source text."""

    d: str
    offset: int
    # (start, end) of the enclosing {...} object literal, end exclusive
    span: tuple[int, int] | None = None


@dataclass
class Extraction:
    view_box: str
    paths: list[PathOccurrence] = field(default_factory=list)
    circles: list[CircleShape] = field(default_factory=list)

    @property
    def num_shapes(self) -> int:
        return len(self.paths) + len(self.circles)


def extract_shapes(text: str) -> Extraction:
    """Scan one icon module and return its viewBox and raw shapes.

    Raises NoViewBox if there is no non-blank viewBox literal and NoShapes if neither
    a path nor a circle is found.
    """
    vb_match = _VIEWBOX_RE.search(text)
    if not vb_match or not vb_match.group(1).strip():
        raise NoViewBox()

    spans = object_spans(text)
    extraction = Extraction(view_box=vb_match.group(1))

    for match in _PATH_D_RE.finditer(text):
        extraction.paths.append(
            PathOccurrence(
                d=match.group(1),
                offset=match.start(),
                span=_innermost_span(spans, match.start()),
            )
        )

    extraction.circles = _extract_circles(text, spans)

    if not extraction.num_shapes:
        raise NoShapes()

    logger.debug(
        "Extracted viewBox %r, %d paths, %d circles",
        extraction.view_box,
        len(extraction.paths),
        len(extraction.circles),
    )
    return extraction


def object_spans(text: str) -> list[tuple[int, int]]:
    """Return (start, end) of every balanced ``{...}`` in text, sorted by start.

    String literals and comments are skipped so braces inside them don't
    count. Unbalanced braces produce no span.
    """
    spans: list[tuple[int, int]] = []
    stack: list[int] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i)
            continue
        if ch == "/" and i + 1 < n and text[i + 1] in "/*":
            i = _skip_comment(text, i)
            continue
        if ch == "{":
            stack.append(i)
        elif ch == "}" and stack:
            spans.append((stack.pop(), i + 1))
        i += 1

    spans.sort()
    return spans


def _skip_string(text: str, start: int) -> int:
    quote = text[start]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return len(text)


def _skip_comment(text: str, start: int) -> int:
    if text[start + 1] == "/":
        end = text.find("\n", start)
        return len(text) if end < 0 else end + 1
    end = text.find("*/", start + 2)
    return len(text) if end < 0 else end + 2


def _innermost_span(spans: list[tuple[int, int]], offset: int) -> tuple[int, int] | None:
    best: tuple[int, int] | None = None
    for start, end in spans:
        if start > offset:
            break
        if offset < end and (best is None or start >= best[0]):
            best = (start, end)
    return best


def _extract_circles(text: str, spans: list[tuple[int, int]]) -> list[CircleShape]:
    span_by_start = {start: end for start, end in spans}
    circles: list[CircleShape] = []

    for match in _CIRCLE_CALL_RE.finditer(text):
        start = match.end()
        end = span_by_start.get(start)
        if end is None:
            continue

        attrs: dict[str, str] = {}
        for m in _CIRCLE_ATTR_RE.finditer(text, start, end):
            key = m.group(1)
            if key in attrs:
                continue
            value = next(g for g in m.group(2, 3, 4) if g is not None)
            attrs[key] = value.strip()

        if {"cx", "cy", "r"} <= attrs.keys():
            circles.append(CircleShape(cx=attrs["cx"], cy=attrs["cy"], r=attrs["r"]))
        else:
            logger.debug("Circle call at %d missing cx/cy/r, ignored", match.start())

    return circles
