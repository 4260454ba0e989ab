"""Error taxonomy for the icon font build.

Per-icon errors (extraction, optimization) are turned into report entries by
the pipeline. Only CompilerFailure escapes a build.
"""

from __future__ import annotations


class IconFontError(Exception):
    """Base class for all iconfont errors."""


class ExtractionError(IconFontError, ValueError):
    reason = "ExtractionError"


class NoViewBox(ExtractionError):
    reason = "NoViewBox"

    def __init__(self, message: str = "No viewBox found") -> None:
        super().__init__(message)


class NoShapes(ExtractionError):
    reason = "NoShapes"

    def __init__(self, message: str = "No SVG paths found") -> None:
        super().__init__(message)


class OptimizationFailure(IconFontError):
    reason = "OptimizationFailure"


class CompilerFailure(IconFontError, RuntimeError):
    reason = "CompilerFailure"
