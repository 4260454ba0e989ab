"""Attach fillRule / clipRule literals to extracted paths.

Generated modules put style attributes next to ``d`` in the same props
object, but nothing ties them together syntactically beyond that. Two modes:

- ``window``: first literal within ``window_radius`` characters either side
  of the ``d`` literal. Paths closer together than the radius can pick up a
  neighbour's attribute.
- ``span``: the same window, clipped to the path's own object literal, so a
  neighbour's attribute is never attached.
"""

from __future__ import annotations

import re

from iconfont.engine.config import PipelineConfig
from iconfont.engine.extractor import Extraction, PathOccurrence
from iconfont.models.icon import PathShape

_FILL_RULE_RE = re.compile(r'fillRule\s*:\s*"([^"]+)"')
_CLIP_RULE_RE = re.compile(r'clipRule\s*:\s*"([^"]+)"')


def search_bounds(
    text: str,
    occurrence: PathOccurrence,
    radius: int,
    mode: str = "span",
) -> tuple[int, int]:
    """Character range searched for the occurrence's style attributes."""
    lo = max(0, occurrence.offset - radius)
    hi = min(len(text), occurrence.offset + radius)
    if mode == "span" and occurrence.span is not None:
        lo = max(lo, occurrence.span[0])
        hi = min(hi, occurrence.span[1])
    return lo, hi


def associate(text: str, occurrence: PathOccurrence, config: PipelineConfig) -> PathShape:
    lo, hi = search_bounds(text, occurrence, config.window_radius, config.association_mode)

    fill = _FILL_RULE_RE.search(text, lo, hi)
    clip = _CLIP_RULE_RE.search(text, lo, hi)

    return PathShape(
        d=occurrence.d,
        fill_rule=fill.group(1) if fill else None,
        clip_rule=clip.group(1) if clip else None,
    )


def associate_all(text: str, extraction: Extraction, config: PipelineConfig) -> list[PathShape]:
    return [associate(text, occ, config) for occ in extraction.paths]
