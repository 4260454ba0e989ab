"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ICONFONT_", env_file=".env", env_file_encoding="utf-8"
    )

    log_level: str = "info"

    # Directories
    input_dir: Path = Path("node_modules/@wordpress/icons/build/library")
    output_dir: Path = Path("dist")
    preview_dir: Path = Path(".")
    # None = fresh temp dir per run
    scratch_dir: Path | None = None

    # Font
    font_name: str = "wordpress-icons"
    prefix: str = "wpi"
    font_types: list[str] = ["woff2", "woff", "ttf"]
    asset_types: list[str] = ["css", "json"]
    font_height: int = 300
    normalize: bool = True
    start_codepoint: int = 0xF101
    json_indent: int = 2

    # Extraction
    association_mode: str = "span"
    window_radius: int = 100

    # Batch
    workers: int = 1
    compile_timeout: float = 300.0
