"""Icon extraction and batch engine."""

from iconfont.engine.config import PipelineConfig
from iconfont.engine.extractor import Extraction, PathOccurrence, extract_shapes
from iconfont.engine.pipeline import BatchResult, Pipeline, build, create_pipeline

__all__ = [
    "BatchResult",
    "Extraction",
    "PathOccurrence",
    "Pipeline",
    "PipelineConfig",
    "build",
    "create_pipeline",
    "extract_shapes",
]
