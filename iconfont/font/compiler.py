"""Font compiler: builds the icon font and its assets from a directory of SVGs.

Each ``<name>.svg`` becomes one glyph, mapped to a Private Use Area codepoint
(seeded codepoints are kept, new icons count up from ``start_codepoint``).
A TrueType font is built with fontTools and re-saved as woff / woff2 as
requested, then the stylesheet and codepoint map are written.
"""

from __future__ import annotations

import hashlib
import io
import logging
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from iconfont.errors import CompilerFailure, ExtractionError
from iconfont.font.assets import write_assets
from iconfont.font.glyphs import build_glyph, glyph_name, glyph_scale, parse_view_box
from iconfont.models.font import FontCompileResult, FontCompilerConfig
from iconfont.models.icon import IconDocument
from iconfont.svg.parser import parse_svg

logger = logging.getLogger(__name__)

_FLAVORS = {"ttf": None, "woff": "woff", "woff2": "woff2"}


def compile_font(config: FontCompilerConfig) -> FontCompileResult:
    """Compile every SVG in config.input_dir. Raises CompilerFailure."""
    docs = load_icons(config.input_dir)
    if not docs:
        raise CompilerFailure(f"No SVG files in {config.input_dir}")

    codepoints = assign_codepoints([d.name for d in docs], config.codepoints, config.start_codepoint)

    try:
        ttf_data = build_font(config, docs, codepoints)
    except CompilerFailure:
        raise
    except Exception as e:
        raise CompilerFailure(f"Font build failed: {e}") from e

    config.output_dir.mkdir(parents=True, exist_ok=True)
    files = write_fonts(config, ttf_data)
    digest = hashlib.sha256(ttf_data).hexdigest()[:12]
    files += write_assets(config, codepoints, digest)

    logger.info("Compiled %d glyphs into %s", len(docs), config.output_dir)
    return FontCompileResult(codepoints=codepoints, files=files)


def load_icons(input_dir: Path) -> list[IconDocument]:
    docs: list[IconDocument] = []
    for path in sorted(input_dir.glob("*.svg")):
        try:
            docs.append(parse_svg(path.read_text(encoding="utf-8"), name=path.stem))
        except (OSError, ExtractionError) as e:
            raise CompilerFailure(f"Cannot read {path.name}: {e}") from e
    return docs


def assign_codepoints(names: list[str], seed: dict[str, int], start: int) -> dict[str, int]:
    """Keep seeded codepoints; give the rest the next free ones from start."""
    codepoints = {name: seed[name] for name in names if name in seed}
    used = set(codepoints.values())
    next_cp = start
    for name in names:
        if name in codepoints:
            continue
        while next_cp in used:
            next_cp += 1
        codepoints[name] = next_cp
        used.add(next_cp)
    return codepoints


def build_font(
    config: FontCompilerConfig, docs: list[IconDocument], codepoints: dict[str, int]
) -> bytes:
    """Build the TrueType font and return its bytes."""
    if config.normalize:
        units_per_em = config.font_height
    else:
        units_per_em = int(round(max(parse_view_box(d.view_box)[3] for d in docs)))

    glyph_order = [".notdef"]
    glyphs = {".notdef": TTGlyphPen(None).glyph()}
    metrics = {".notdef": (units_per_em, 0)}
    cmap: dict[int, str] = {}
    taken: set[str] = {".notdef"}

    for doc in docs:
        gname = glyph_name(doc.name, taken)
        scale = glyph_scale(parse_view_box(doc.view_box), units_per_em, config.normalize)
        glyph, advance = build_glyph(doc, scale)

        glyph_order.append(gname)
        glyphs[gname] = glyph
        metrics[gname] = (advance, 0)
        cmap[codepoints[doc.name]] = gname

    fb = FontBuilder(units_per_em, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    # lsb from the glyph bounds computed by setupGlyf
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (adv, getattr(glyf[name], "xMin", 0)) for name, (adv, _) in metrics.items()}
    )
    fb.setupHorizontalHeader(ascent=units_per_em, descent=0)
    fb.setupOS2(
        sTypoAscender=units_per_em,
        sTypoDescender=0,
        sTypoLineGap=0,
        usWinAscent=units_per_em,
        usWinDescent=0,
    )
    fb.setupNameTable(
        {
            "familyName": config.name,
            "styleName": "Regular",
            "uniqueFontIdentifier": f"{config.name}-Regular",
            "fullName": f"{config.name} Regular",
            "psName": f"{config.name}-Regular".replace(" ", ""),
            "version": "1.0",
        }
    )
    fb.setupPost()
    fb.setupMaxp()

    buf = io.BytesIO()
    fb.save(buf)
    return buf.getvalue()


def write_fonts(config: FontCompilerConfig, ttf_data: bytes) -> list[Path]:
    written: list[Path] = []
    for font_type in config.font_types:
        path = config.output_dir / f"{config.name}.{font_type}"
        if font_type == "ttf":
            path.write_bytes(ttf_data)
        else:
            font = TTFont(io.BytesIO(ttf_data))
            font.flavor = _FLAVORS[font_type]
            font.save(str(path))
        written.append(path)
    return written
