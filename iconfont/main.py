"""Command-line entry point: build the icon font from a directory of icon modules."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from iconfont.config import Settings
from iconfont.engine.pipeline import build
from iconfont.errors import CompilerFailure

logger = logging.getLogger("iconfont")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="iconfont",
        description="Convert generated icon modules into an icon font with CSS, JSON and a preview page.",
    )
    parser.add_argument("-i", "--input-dir", help="Directory of icon modules (*.js)")
    parser.add_argument("-o", "--output-dir", help="Where fonts, CSS and JSON are written")
    parser.add_argument("--preview-dir", help="Where index.html and preview.css are written")
    parser.add_argument("--name", dest="font_name", help="Font family name")
    parser.add_argument("--prefix", help="CSS class prefix")
    parser.add_argument(
        "--font-types", nargs="+", choices=["ttf", "woff", "woff2"], help="Font formats to emit"
    )
    parser.add_argument("--workers", type=int, help="Icons processed in parallel")
    parser.add_argument(
        "--association-mode",
        choices=["span", "window"],
        help="How fillRule/clipRule literals are matched to paths",
    )
    parser.add_argument("--window-radius", type=int, help="Attribute search radius in characters")
    parser.add_argument("--log-level", help="debug, info, warning, error")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(sys.argv[1:] if argv is None else argv)

    overrides = {k: v for k, v in vars(args).items() if v is not None}
    settings = Settings(**overrides)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        result = build(settings)
    except OSError as e:
        # missing input dir or non-empty scratch dir
        logger.error("%s", e)
        return 1
    except CompilerFailure as e:
        logger.error("Font generation failed: %s", e)
        return 1

    report = result.batch.report
    logger.info("%s", report.summary())
    for skip in report.skip_reasons:
        logger.info("  skipped %s (%s): %s", skip.name, skip.reason, skip.message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
