"""SVG optimizer: shrinks assembled icon SVG without changing its geometry.

Passes:
- drop comments, metadata and every attribute outside the icon vocabulary
- drop fill-rule / clip-rule when they equal the SVG default
- rewrite path data compactly, rounding floats to ``precision`` decimals
- round circle coordinates the same way

The viewBox must hold four numbers with a positive width and height; it
is copied verbatim unless ``remove_viewbox`` is set, and every
<path> / <circle> survives, so the shape count never changes. With
``multipass`` the passes repeat until the output is stable.
"""

from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from svgpathtools import parse_path

from iconfont.errors import OptimizationFailure
from iconfont.font.glyphs import parse_view_box

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

SHAPE_TAGS = ("path", "circle")
DROP_TAGS = {"title", "desc", "metadata"}
DEFAULT_RULE = "nonzero"

# Arguments per path command
_ARITY = {"m": 2, "l": 2, "h": 1, "v": 1, "c": 6, "s": 4, "q": 4, "t": 2, "a": 7, "z": 0}
_COMMANDS = frozenset("MmZzLlHhVvCcSsQqTtAa")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEP_RE = re.compile(r"[\s,]*")


@dataclass
class OptimizeOptions:
    multipass: bool = True
    remove_viewbox: bool = False
    # Decimal places kept in coordinates
    precision: int = 3
    max_passes: int = 10


def optimize(svg_text: str, options: OptimizeOptions | None = None) -> str:
    """Optimize one icon SVG. Raises OptimizationFailure on malformed input."""
    options = options or OptimizeOptions()

    result = _optimize_once(svg_text, options)
    if options.multipass:
        for _ in range(options.max_passes - 1):
            again = _optimize_once(result, options)
            if again == result:
                break
            result = again
    return result


def _optimize_once(svg_text: str, options: OptimizeOptions) -> str:
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise OptimizationFailure(f"Malformed SVG: {e}") from e

    if _localname(root.tag) != "svg":
        raise OptimizationFailure(f"Root element is <{_localname(root.tag)}>, expected <svg>")

    view_box = root.get("viewBox")
    if view_box is not None:
        try:
            parse_view_box(view_box)
        except ValueError as e:
            raise OptimizationFailure(f"Unusable viewBox: {view_box!r}") from e
    elif not options.remove_viewbox:
        raise OptimizationFailure("<svg> has no viewBox")

    root_attrs = {"xmlns": SVG_NS}
    if view_box is not None and not options.remove_viewbox:
        root_attrs["viewBox"] = view_box

    children: list[str] = []
    for elem in root.iter():
        tag = _localname(elem.tag)
        if tag in SHAPE_TAGS:
            children.append(_render(tag, _shape_attrs(tag, elem, options)))
        elif elem is not root and tag not in DROP_TAGS and tag != "g":
            logger.debug("Dropping unsupported <%s>", tag)

    return f"<svg{_attr_string(root_attrs)}>{''.join(children)}</svg>"


def _shape_attrs(tag: str, elem: ET.Element, options: OptimizeOptions) -> dict[str, str]:
    if tag == "circle":
        attrs: dict[str, str] = {}
        for key in ("cx", "cy", "r"):
            value = elem.get(key)
            if value is None:
                raise OptimizationFailure(f"<circle> is missing {key}")
            attrs[key] = _round_value(key, value, options.precision)
        return attrs

    d = elem.get("d")
    if not d:
        raise OptimizationFailure("<path> has no path data")
    try:
        compact = compact_path_data(d, options.precision)
        parse_path(compact)
    except Exception as e:
        raise OptimizationFailure(f"Invalid path data: {e}") from e

    attrs = {"d": compact}
    for key in ("fill-rule", "clip-rule"):
        value = elem.get(key)
        if value is not None and value.strip() != DEFAULT_RULE:
            attrs[key] = value
    return attrs


def compact_path_data(d: str, precision: int = 3) -> str:
    """Rewrite path data with rounded numbers and minimal separators."""
    out: list[str] = []
    for cmd, args in tokenize_path(d):
        out.append(cmd)
        prev = cmd
        for i, raw in enumerate(args):
            is_flag = cmd in "Aa" and i % 7 in (3, 4)
            token = raw if is_flag else format_number(float(raw), precision)
            if prev not in _COMMANDS and not _joins(prev, token):
                out.append(" ")
            out.append(token)
            prev = token
    return "".join(out)


def tokenize_path(d: str) -> list[tuple[str, list[str]]]:
    """Split path data into (command, flat argument list) pairs.

    Arc flags are read as single characters, so compact forms like
    ``a.5.5 0 01-.5.5`` are understood. Raises ValueError on bad data.
    """
    segments: list[tuple[str, list[str]]] = []
    n = len(d)
    pos = _SEP_RE.match(d, 0).end()

    while pos < n:
        cmd = d[pos]
        if cmd not in _COMMANDS:
            raise ValueError(f"Unexpected {cmd!r} at {pos}")
        pos += 1
        arity = _ARITY[cmd.lower()]
        args: list[str] = []

        while arity:
            pos = _SEP_RE.match(d, pos).end()
            if pos >= n or d[pos] in _COMMANDS:
                break
            for i in range(arity):
                pos = _SEP_RE.match(d, pos).end()
                if cmd in "Aa" and i in (3, 4):
                    if pos >= n or d[pos] not in "01":
                        raise ValueError(f"Bad arc flag at {pos}")
                    args.append(d[pos])
                    pos += 1
                    continue
                m = _NUMBER_RE.match(d, pos)
                if not m:
                    raise ValueError(f"Expected number at {pos}")
                args.append(m.group())
                pos = m.end()

        if arity and not args:
            raise ValueError(f"Command {cmd!r} has no arguments")
        segments.append((cmd, args))
        pos = _SEP_RE.match(d, pos).end()

    if not segments:
        raise ValueError("Empty path data")
    if segments[0][0] not in "Mm":
        raise ValueError("Path data must start with a moveto")
    return segments


def format_number(value: float, precision: int) -> str:
    s = f"{round(value, precision):.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s in ("-0", ""):
        return "0"
    if s.startswith("0."):
        return s[1:]
    if s.startswith("-0."):
        return "-" + s[2:]
    return s


def _round_value(key: str, value: str, precision: int) -> str:
    try:
        number = float(value)
    except ValueError as e:
        raise OptimizationFailure(f"<circle> {key} is not a number: {value!r}") from e
    if not math.isfinite(number):
        raise OptimizationFailure(f"<circle> {key} is not finite: {value!r}")
    return format_number(number, precision)


def _joins(prev: str, token: str) -> bool:
    """True if token can follow prev with no separator."""
    if token.startswith("-"):
        return True
    return token.startswith(".") and ("." in prev or "e" in prev.lower())


def _render(tag: str, attrs: dict[str, str]) -> str:
    return f"<{tag}{_attr_string(attrs)}/>"


def _attr_string(attrs: dict[str, str]) -> str:
    return "".join(f' {k}="{_escape(v)}"' for k, v in attrs.items())


def _escape(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace('"', "&quot;")


def _localname(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag
