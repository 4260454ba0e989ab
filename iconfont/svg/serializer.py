"""Write SVG markup from an extracted icon document."""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from iconfont.models.icon import CircleShape, IconDocument, PathShape

SVG_NS = "http://www.w3.org/2000/svg"


def serialize_icon(doc: IconDocument) -> str:
    """Render an icon as a standalone SVG document, one element per shape."""
    lines = [f"<svg xmlns={quoteattr(SVG_NS)} viewBox={quoteattr(doc.view_box)}>"]

    for shape in doc.shapes:
        lines.append(f"  {serialize_shape(shape)}")

    lines.append("</svg>")
    return "\n".join(lines)


def serialize_shape(shape: PathShape | CircleShape) -> str:
    if isinstance(shape, CircleShape):
        attrs = {"cx": shape.cx, "cy": shape.cy, "r": shape.r}
        tag = "circle"
    else:
        attrs = {"d": shape.d}
        if shape.fill_rule is not None:
            attrs["fill-rule"] = shape.fill_rule
        if shape.clip_rule is not None:
            attrs["clip-rule"] = shape.clip_rule
        tag = "path"

    attr_str = " ".join(f"{k}={quoteattr(v)}" for k, v in attrs.items())
    return f"<{tag} {attr_str}/>"
