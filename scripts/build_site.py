#!/usr/bin/env python3
"""
build_site.py - Export the lesson site as static HTML.

Validates the catalog and every lesson document, then writes one page per
lesson plus the landing page, 404.html and catalog.json.

Usage:
  python scripts/build_site.py
  python scripts/build_site.py --content content --output site --clean
  python scripts/build_site.py --check
"""

import argparse
import logging
import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
from pydantic import ValidationError
import yaml

from pglearn.classroom import ContentLoader, RouteError
from pglearn.utils import CONTENT_DIR
from pglearn.viewer import DEFAULT_OUTPUT_DIR, build_site, check_content

load_dotenv(PROJECT_ROOT / ".env")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export the PostgreSQL Learning site as static HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate content only
  python scripts/build_site.py --check

  # Fresh export for hosting under /pg-learning/
  python scripts/build_site.py --clean --base-url /pg-learning/
        """
    )
    parser.add_argument(
        "--content",
        type=Path,
        default=Path(os.environ.get("PGLEARN_CONTENT_DIR", CONTENT_DIR)),
        help="Content directory with catalog.yaml and lessons/ (default: $PGLEARN_CONTENT_DIR or ./content)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Output directory (default: site)",
    )
    parser.add_argument(
        "--base-url",
        default="/",
        help="URL prefix the site is served under (default: /)",
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove the output directory before writing",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate catalog and lessons without writing pages",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        loader = ContentLoader(args.content)
        if args.check:
            check = check_content(loader)
            if check.orphan_paths:
                logger.warning("%d lesson documents are not in the catalog", len(check.orphan_paths))
            return 0

        report = build_site(
            loader,
            output_dir=args.output,
            base_url=args.base_url,
            clean=args.clean,
        )
    except (FileNotFoundError, ValidationError, RouteError, ValueError, yaml.YAMLError) as e:
        logger.error("Content check failed: %s", e)
        return 1

    logger.info("Site written to %s (%d pages)", report.output_dir, len(report.pages))
    return 0


if __name__ == "__main__":
    sys.exit(main())
