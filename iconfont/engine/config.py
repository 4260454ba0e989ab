"""Pipeline configuration: controls extraction and batch behavior."""

from __future__ import annotations

from dataclasses import dataclass, field

from iconfont.svg.optimizer import OptimizeOptions


@dataclass
class PipelineConfig:
    """Tunables for one batch run."""

    # Style-attribute search radius around a path literal, in characters
    window_radius: int = 100
    # "span": only inside the path's own object literal; "window": raw radius
    association_mode: str = "span"

    optimize: OptimizeOptions = field(default_factory=OptimizeOptions)

    # 1 = sequential; >1 = thread pool, results merged in source order
    workers: int = 1

    # Seconds to wait for the font compiler
    compile_timeout: float = 300.0

    def __post_init__(self) -> None:
        if self.association_mode not in ("span", "window"):
            raise ValueError(f"Unknown association mode: {self.association_mode!r}")
        if self.window_radius < 0:
            raise ValueError("window_radius must be >= 0")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
