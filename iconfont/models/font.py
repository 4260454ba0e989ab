"""Font compiler configuration and result models."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

FontType = Literal["ttf", "woff", "woff2"]
AssetType = Literal["css", "json"]

DEFAULT_START_CODEPOINT = 0xF101


class FontCompilerConfig(BaseModel):
    """Options handed to the font compiler.

    Field aliases follow the camelCase keys of the compiler contract
    (``inputDir``, ``fontTypes``, ...); either spelling is accepted.
    """

    model_config = ConfigDict(populate_by_name=True)

    input_dir: Path = Field(alias="inputDir")
    output_dir: Path = Field(alias="outputDir")
    name: str = "wordpress-icons"
    font_types: list[FontType] = Field(
        default_factory=lambda: ["woff2", "woff", "ttf"], alias="fontTypes"
    )
    asset_types: list[AssetType] = Field(
        default_factory=lambda: ["css", "json"], alias="assetTypes"
    )
    prefix: str = "wpi"
    codepoints: dict[str, int] = Field(default_factory=dict)
    font_height: int = Field(default=300, alias="fontHeight", gt=0)
    normalize: bool = True
    format_options: dict[str, dict[str, Any]] = Field(
        default_factory=lambda: {"json": {"indent": 2}}, alias="formatOptions"
    )
    start_codepoint: int = Field(default=DEFAULT_START_CODEPOINT, alias="startCodepoint")

    @field_validator("font_types")
    @classmethod
    def _at_least_one_font(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("fontTypes must name at least one format")
        # Keep caller order, drop repeats
        return list(dict.fromkeys(v))

    @property
    def json_indent(self) -> int | None:
        return self.format_options.get("json", {}).get("indent")


class FontCompileResult(BaseModel):
    """Asset manifest returned by the compiler."""

    codepoints: dict[str, int] = Field(default_factory=dict)
    files: list[Path] = Field(default_factory=list)

    @property
    def icon_names(self) -> list[str]:
        return sorted(self.codepoints)
