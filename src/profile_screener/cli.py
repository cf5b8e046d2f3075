"""
Command-line entry point.

    profile-screener run candidates.csv --output ranked.csv [--config screener.yaml]

Exit codes:
    0 success, 1 configuration error, 2 input error,
    3 upstream (enrichment) error, 4 output error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from profile_screener import configure_logging
from profile_screener.adapters.stub_services import StubEnrichmentService, StubScoringOracle
from profile_screener.config.loader import ConfigLoader
from profile_screener.config.models import ScreenerConfig
from profile_screener.pipeline.factory import create_pipeline
from profile_screener.resilience.errors import (
    ConfigurationError,
    InputError,
    OutputError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_INPUT = 2
EXIT_UPSTREAM = 3
EXIT_OUTPUT = 4


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="profile-screener",
        description="Enrich and rate a table of candidate profiles",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Screen a source table and write the ranked report")
    run.add_argument("input", type=Path, help="Delimited table with a header row")
    run.add_argument("--output", "-o", type=Path, required=True,
                     help="Where to write the ranked CSV report")
    run.add_argument("--config", "-c", type=Path, default=None,
                     help="YAML configuration file")
    run.add_argument("--profile", default=None,
                     help="Profile merged from profiles/<name>.yaml beside the config file")
    run.add_argument("--dry-run", action="store_true",
                     help="Use stub services instead of the real endpoints")
    run.add_argument("--verbose", "-v", action="store_true")
    return ap


def load_settings(config_path: Optional[Path], profile: Optional[str]) -> ScreenerConfig:
    if config_path is None:
        return ScreenerConfig()
    loader = ConfigLoader(base_path=config_path.parent)
    return loader.load(config_path.name, profile)


def run(args: argparse.Namespace) -> int:
    try:
        config = load_settings(args.config, args.profile)
        if args.dry_run:
            pipeline = create_pipeline(
                config,
                enrichment_service=StubEnrichmentService(),
                scoring_oracle=StubScoringOracle(),
            )
        else:
            pipeline = create_pipeline(config)
    except (ConfigurationError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG

    try:
        with pipeline:
            result = pipeline.screen_file(args.input, args.output)
    except InputError as e:
        logger.error(f"Input error: {e}")
        return EXIT_INPUT
    except UpstreamError as e:
        logger.error(f"Enrichment failed, run aborted: {e}")
        return EXIT_UPSTREAM
    except OutputError as e:
        logger.error(f"Could not write report: {e}")
        return EXIT_OUTPUT

    print(result.summary)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    if args.command == "run":
        return run(args)
    return EXIT_CONFIG


if __name__ == "__main__":
    sys.exit(main())
