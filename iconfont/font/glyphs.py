"""Draw icon shapes into TrueType glyphs."""

from __future__ import annotations

import math
import re

import numpy as np
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.transformPen import TransformPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib.tables._g_l_y_f import Glyph
from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier, parse_path
from svgpathtools import Path as SvgPath

from iconfont.models.icon import CircleShape, IconDocument, PathShape

# Max deviation (font units) when converting cubics to quadratics
_CU2QU_MAX_ERR = 1.0

_GLYPH_NAME_BAD_CHARS_RE = re.compile(r"[^A-Za-z0-9._]")


def parse_view_box(view_box: str) -> np.ndarray:
    """viewBox string → array [min_x, min_y, width, height]."""
    values = np.array(view_box.replace(",", " ").split(), dtype=float)
    if (
        values.shape != (4,)
        or not np.isfinite(values).all()
        or values[2] <= 0
        or values[3] <= 0
    ):
        raise ValueError(f"Unusable viewBox: {view_box!r}")
    return values


def glyph_name(icon_name: str, taken: set[str]) -> str:
    """Post-table-safe glyph name, unique within taken."""
    base = _GLYPH_NAME_BAD_CHARS_RE.sub("_", icon_name)[:50] or "icon"
    if base[0].isdigit() or base[0] == ".":
        base = f"g_{base}"
    name = base
    n = 1
    while name in taken:
        name = f"{base}.{n}"
        n += 1
    taken.add(name)
    return name


def glyph_scale(view_box: np.ndarray, units_per_em: int, normalize: bool) -> float:
    """Scale from viewBox units to font units."""
    if normalize:
        return units_per_em / float(view_box[3])
    return 1.0


def build_glyph(doc: IconDocument, scale: float) -> tuple[Glyph, int]:
    """Return the TrueType glyph and its advance width for one icon.

    The viewBox bottom sits on the baseline and y is flipped.
    """
    min_x, min_y, width, height = parse_view_box(doc.view_box)

    tt_pen = TTGlyphPen(None)
    cu2qu_pen = Cu2QuPen(tt_pen, max_err=_CU2QU_MAX_ERR, reverse_direction=True)
    transform_pen = TransformPen(
        cu2qu_pen, (scale, 0, 0, -scale, -min_x * scale, (min_y + height) * scale)
    )

    for shape in doc.shapes:
        draw_path(shape_to_path(shape), transform_pen)

    return tt_pen.glyph(), int(round(width * scale))


def shape_to_path(shape: PathShape | CircleShape) -> SvgPath:
    if isinstance(shape, CircleShape):
        cx, cy, r = float(shape.cx), float(shape.cy), float(shape.r)
        # Two half-circle arcs
        return parse_path(
            f"M {cx - r} {cy} A {r} {r} 0 1 0 {cx + r} {cy} A {r} {r} 0 1 0 {cx - r} {cy} Z"
        )
    return parse_path(shape.d)


def draw_path(path: SvgPath, pen: TransformPen) -> None:
    """Draw SVG path segments into a pen."""
    subpath_start = None
    current_point = None

    for segment in path:
        start = (segment.start.real, segment.start.imag)
        end = (segment.end.real, segment.end.imag)

        if current_point is None or start != current_point:
            if subpath_start is not None:
                pen.endPath()
            pen.moveTo(start)
            subpath_start = start

        if isinstance(segment, Line):
            pen.lineTo(end)
        elif isinstance(segment, QuadraticBezier):
            pen.qCurveTo((segment.control.real, segment.control.imag), end)
        elif isinstance(segment, CubicBezier):
            pen.curveTo(
                (segment.control1.real, segment.control1.imag),
                (segment.control2.real, segment.control2.imag),
                end,
            )
        elif isinstance(segment, Arc):
            # one cubic per quarter turn
            curves = max(1, math.ceil(abs(segment.delta) / 90))
            for cubic in segment.as_cubic_curves(curves):
                pen.curveTo(
                    (cubic.control1.real, cubic.control1.imag),
                    (cubic.control2.real, cubic.control2.imag),
                    (cubic.end.real, cubic.end.imag),
                )
        else:
            raise ValueError(f"Unknown segment type: {type(segment).__name__}")

        current_point = end

        if subpath_start is not None and end == subpath_start:
            pen.closePath()
            subpath_start = None
            current_point = None

    if subpath_start is not None:
        pen.endPath()
