"""Enumerate icon module sources from a build directory."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from iconfont.models.icon import IconModuleSource

logger = logging.getLogger(__name__)

MODULE_SUFFIX = ".js"


def iter_module_paths(directory: Path) -> list[Path]:
    """Icon module files in name order. Source maps are skipped."""
    return sorted(
        p
        for p in directory.iterdir()
        if p.is_file() and p.name.endswith(MODULE_SUFFIX) and not p.name.endswith(".js.map")
    )


def read_source(path: Path) -> IconModuleSource:
    return IconModuleSource(
        name=path.name[: -len(MODULE_SUFFIX)],
        path=str(path),
        text=path.read_text(encoding="utf-8"),
    )


def load_sources(directory: Path) -> Iterator[IconModuleSource | tuple[str, Exception]]:
    """Yield each readable source, or (name, error) for one that can't be read."""
    for path in iter_module_paths(directory):
        try:
            yield read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", path, e)
            yield path.name[: -len(MODULE_SUFFIX)], e
