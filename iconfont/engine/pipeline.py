"""Pipeline orchestrator: turns icon modules into optimized SVGs and compiles the font.

Every icon moves through Pending → Extracted → Associated → Assembled →
Optimized → Written, or stops at Skipped with the step and reason recorded.
Per-icon failures never abort the batch; only the font compiler can.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import time
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass, field
from multiprocessing import Pool
from multiprocessing import TimeoutError as PoolTimeoutError
from pathlib import Path

from iconfont.config import Settings
from iconfont.engine.associator import associate_all
from iconfont.engine.config import PipelineConfig
from iconfont.engine.extractor import extract_shapes
from iconfont.engine.sources import load_sources
from iconfont.errors import CompilerFailure, ExtractionError
from iconfont.font.compiler import compile_font
from iconfont.models.font import FontCompileResult, FontCompilerConfig
from iconfont.models.icon import IconDocument, IconModuleSource
from iconfont.models.report import IconResult, IconState, ProcessingReport, SkipReason
from iconfont.preview.page import write_preview
from iconfont.svg.optimizer import OptimizeOptions, optimize
from iconfont.svg.serializer import serialize_icon

logger = logging.getLogger(__name__)

Optimizer = Callable[[str, OptimizeOptions], str]
Compiler = Callable[[FontCompilerConfig], FontCompileResult]
SourceItem = IconModuleSource | tuple[str, Exception]


@dataclass
class BatchResult:
    report: ProcessingReport = field(default_factory=ProcessingReport)
    results: list[IconResult] = field(default_factory=list)

    @property
    def written(self) -> list[str]:
        return [r.name for r in self.results if r.ok]


@dataclass
class BuildResult:
    batch: BatchResult
    fonts: FontCompileResult
    preview_files: list[Path] = field(default_factory=list)


class Pipeline:
    """Runs the per-icon extraction → optimization steps over a batch."""

    def __init__(
        self,
        config: PipelineConfig | None = None,
        optimizer: Optimizer = optimize,
    ) -> None:
        self.config = config or PipelineConfig()
        self.optimizer = optimizer

    def run(self, sources: Iterable[SourceItem], out_dir: Path | None = None) -> BatchResult:
        """Process every source; write optimized SVGs to out_dir when given."""
        start = time.perf_counter()
        items = list(sources)

        if self.config.workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as pool:
                results = list(pool.map(lambda item: self._process_item(item, out_dir), items))
        else:
            results = [self._process_item(item, out_dir) for item in items]

        report = ProcessingReport.merge(results)
        logger.info(
            "%s (%.0fms)", report.summary(), (time.perf_counter() - start) * 1000
        )
        return BatchResult(report=report, results=results)

    def _process_item(self, item: SourceItem, out_dir: Path | None) -> IconResult:
        if isinstance(item, IconModuleSource):
            return self.process(item, out_dir)
        name, error = item
        return self._skip(IconResult(name=name), "ReadFailure", str(error))

    def process(self, source: IconModuleSource, out_dir: Path | None = None) -> IconResult:
        """Take one icon as far through the pipeline as it will go."""
        result = IconResult(name=source.name)

        try:
            extraction = extract_shapes(source.text)
        except ExtractionError as e:
            return self._skip(result, e.reason, str(e))
        result.state = IconState.EXTRACTED

        try:
            paths = associate_all(source.text, extraction, self.config)
            result.state = IconState.ASSOCIATED

            doc = IconDocument(
                name=source.name,
                view_box=extraction.view_box,
                shapes=[*paths, *extraction.circles],
            )
            svg = serialize_icon(doc)
        except Exception as e:
            return self._skip(result, "AssemblyFailure", str(e))
        result.state = IconState.ASSEMBLED

        try:
            svg = self.optimizer(svg, self.config.optimize)
        except Exception as e:
            return self._skip(result, "OptimizationFailure", str(e))
        result.svg = svg
        result.state = IconState.OPTIMIZED

        if out_dir is not None:
            try:
                (out_dir / f"{source.name}.svg").write_text(svg, encoding="utf-8")
            except OSError as e:
                return self._skip(result, "WriteFailure", str(e))
        result.state = IconState.WRITTEN

        logger.debug(
            "%s: %d paths, %d circles written", source.name, doc.num_paths, doc.num_circles
        )
        return result

    @staticmethod
    def _skip(result: IconResult, reason: str, message: str) -> IconResult:
        logger.info("Skipped %s: %s", result.name, message or reason)
        result.skip = SkipReason(name=result.name, step=result.state, reason=reason, message=message)
        result.state = IconState.SKIPPED
        result.svg = ""
        return result


@contextmanager
def scratch_directory(path: Path | None = None) -> Iterator[Path]:
    """Yield a scratch directory that is removed on every exit path."""
    if path is None:
        scratch = Path(tempfile.mkdtemp(prefix="iconfont-"))
    else:
        if path.exists() and any(path.iterdir()):
            raise FileExistsError(f"Scratch directory is not empty: {path}")
        path.mkdir(parents=True, exist_ok=True)
        scratch = path
    try:
        yield scratch
    finally:
        shutil.rmtree(scratch, ignore_errors=True)
        logger.debug("Removed scratch directory %s", scratch)


def font_config(settings: Settings, input_dir: Path) -> FontCompilerConfig:
    return FontCompilerConfig(
        input_dir=input_dir,
        output_dir=settings.output_dir,
        name=settings.font_name,
        font_types=settings.font_types,
        asset_types=settings.asset_types,
        prefix=settings.prefix,
        codepoints={},
        font_height=settings.font_height,
        normalize=settings.normalize,
        format_options={"json": {"indent": settings.json_indent}},
        start_codepoint=settings.start_codepoint,
    )


def run_compiler(compiler: Compiler, config: FontCompilerConfig, timeout: float) -> FontCompileResult:
    """Call the compiler once in a worker process, bounded by timeout seconds.

    The worker is terminated on every exit path, so a compiler that overruns
    its deadline cannot keep writing output after the build has failed.
    """
    with Pool(processes=1) as pool:
        pending = pool.apply_async(compiler, (config,))
        try:
            return pending.get(timeout=timeout)
        except PoolTimeoutError as e:
            raise CompilerFailure(f"Font compiler timed out after {timeout:g}s") from e
        except CompilerFailure:
            raise
        except Exception as e:
            raise CompilerFailure(str(e)) from e


def create_pipeline(settings: Settings) -> Pipeline:
    """Factory function for creating a pipeline from settings."""
    return Pipeline(
        config=PipelineConfig(
            window_radius=settings.window_radius,
            association_mode=settings.association_mode,
            workers=settings.workers,
            compile_timeout=settings.compile_timeout,
        )
    )


def build(
    settings: Settings,
    pipeline: Pipeline | None = None,
    compiler: Compiler = compile_font,
) -> BuildResult:
    """Run a full build: icons → scratch SVGs → font → preview.

    Raises CompilerFailure if the font can't be built; the scratch directory
    is gone by then either way.
    """
    pipeline = pipeline or create_pipeline(settings)
    if not settings.input_dir.is_dir():
        raise FileNotFoundError(f"Icon directory not found: {settings.input_dir}")
    settings.output_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Extracting SVG data from icon modules in %s", settings.input_dir)

    with scratch_directory(settings.scratch_dir) as scratch:
        batch = pipeline.run(load_sources(settings.input_dir), scratch)
        logger.info("Wrote %d SVGs to %s", len(batch.written), scratch)
        if not batch.report.processed:
            raise CompilerFailure("No icons to compile")

        config = font_config(settings, scratch)
        logger.info("Starting font generation")
        fonts = run_compiler(compiler, config, pipeline.config.compile_timeout)

    preview_files = write_preview(settings.preview_dir, fonts.icon_names, config)

    logger.info("Font generated: %d icons", len(fonts.codepoints))
    for path in [*fonts.files, *preview_files]:
        logger.info("  %s", path)

    return BuildResult(batch=batch, fonts=fonts, preview_files=preview_files)
