"""Auxiliary assets written next to the font: stylesheet and codepoint map."""

from __future__ import annotations

import json
from pathlib import Path

from iconfont.models.font import FontCompilerConfig

# file extension -> CSS format() name, in @font-face preference order
_CSS_FORMATS = {
    "woff2": "woff2",
    "woff": "woff",
    "ttf": "truetype",
}


def render_css(config: FontCompilerConfig, codepoints: dict[str, int], digest: str) -> str:
    """Stylesheet with @font-face and one ``.{prefix}-{name}:before`` rule per icon."""
    sources = [
        f'url("./{config.name}.{ext}?{digest}") format("{fmt}")'
        for ext, fmt in _CSS_FORMATS.items()
        if ext in config.font_types
    ]
    src = ",\n         ".join(sources)
    prefix = config.prefix

    lines = [
        "@font-face {",
        f'    font-family: "{config.name}";',
        f"    src: {src};",
        "}",
        "",
        f'i[class^="{prefix}-"]:before, i[class*=" {prefix}-"]:before {{',
        f"    font-family: {config.name} !important;",
        "    font-style: normal;",
        "    font-weight: normal !important;",
        "    font-variant: normal;",
        "    text-transform: none;",
        "    line-height: 1;",
        "    -webkit-font-smoothing: antialiased;",
        "    -moz-osx-font-smoothing: grayscale;",
        "}",
    ]
    for name in sorted(codepoints, key=lambda n: codepoints[n]):
        lines += [
            "",
            f".{prefix}-{name}:before {{",
            f'    content: "\\{codepoints[name]:x}";',
            "}",
        ]
    return "\n".join(lines) + "\n"


def render_json(config: FontCompilerConfig, codepoints: dict[str, int]) -> str:
    return json.dumps(dict(sorted(codepoints.items())), indent=config.json_indent) + "\n"


def write_assets(
    config: FontCompilerConfig, codepoints: dict[str, int], digest: str
) -> list[Path]:
    written: list[Path] = []
    if "css" in config.asset_types:
        path = config.output_dir / f"{config.name}.css"
        path.write_text(render_css(config, codepoints, digest), encoding="utf-8")
        written.append(path)
    if "json" in config.asset_types:
        path = config.output_dir / f"{config.name}.json"
        path.write_text(render_json(config, codepoints), encoding="utf-8")
        written.append(path)
    return written
