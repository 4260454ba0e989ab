"""SVG reader: recovers an IconDocument from assembled or optimized SVG text.

Only the vocabulary this project writes is understood: the root viewBox,
<path> with d / fill-rule / clip-rule, and <circle> with cx / cy / r.
"""

from __future__ import annotations

import html
import logging
import re

from iconfont.errors import NoShapes, NoViewBox
from iconfont.models.icon import CircleShape, IconDocument, PathShape

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r'<svg\b[^>]*?\sviewBox\s*=\s*(["\'])(.*?)\1', re.DOTALL)
_SHAPE_TAG_RE = re.compile(r"<(path|circle)\b[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r'([\w:-]+)\s*=\s*(?:"([^"]*)"|\'([^\']*)\')')


def parse_svg(svg_text: str, name: str = "") -> IconDocument:
    """Parse SVG text into an IconDocument, shapes in document order."""
    vb_match = _VIEWBOX_RE.search(svg_text)
    if not vb_match or not vb_match.group(2).strip():
        raise NoViewBox()

    shapes: list[PathShape | CircleShape] = []
    for match in _SHAPE_TAG_RE.finditer(svg_text):
        tag = match.group(1).lower()
        attrs = _extract_attrs(match.group(0))

        if tag == "path":
            if not attrs.get("d"):
                logger.warning("%s: <path> without d, ignored", name or "svg")
                continue
            shapes.append(
                PathShape(
                    d=attrs["d"],
                    fill_rule=attrs.get("fill-rule"),
                    clip_rule=attrs.get("clip-rule"),
                )
            )
        else:
            try:
                shapes.append(CircleShape(cx=attrs["cx"], cy=attrs["cy"], r=attrs["r"]))
            except KeyError:
                logger.warning("%s: <circle> missing cx/cy/r, ignored", name or "svg")

    if not shapes:
        raise NoShapes()

    return IconDocument(name=name, view_box=html.unescape(vb_match.group(2)), shapes=shapes)


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from an SVG tag string."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = html.unescape(value)
    return attrs
