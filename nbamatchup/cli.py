"""CLI entry points."""

from pathlib import Path
from typing import Optional, Sequence
import argparse
import asyncio
import json
import logging
import sys
import uuid

import pandas as pd

from nbamatchup.catalog import TeamCatalog
from nbamatchup.config import Config
from nbamatchup.exceptions import MatchupError
from nbamatchup.ops.logging import configure_logging
from nbamatchup.reporting.output import (
    format_prediction,
    write_prediction_json,
    write_predictions_csv,
)
from nbamatchup.workflow import PredictionWorkflow, WorkflowStatus

logger = logging.getLogger(__name__)


def _load_catalog(config: Config, catalog_path: Optional[str]) -> TeamCatalog:
    return TeamCatalog.load(catalog_path or config.catalog_path)


def run_list_teams(config_path: Optional[str] = None, catalog_path: Optional[str] = None) -> int:
    try:
        config = Config.load(config_path)
        catalog = _load_catalog(config, catalog_path)
    except MatchupError as exc:
        logger.error("Could not load catalog: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    frame = catalog.to_frame()
    with pd.option_context("display.width", 120, "display.max_columns", None):
        print(frame.to_string(index=False))
    return 0


def run_predict(
    home: str,
    away: str,
    config_path: Optional[str] = None,
    catalog_path: Optional[str] = None,
    delay: Optional[float] = None,
    output_path: Optional[str] = None,
    as_json: bool = False,
    log_level: Optional[str] = None,
) -> int:
    run_id = uuid.uuid4().hex[:12]
    configure_logging(run_id, level=log_level)

    try:
        config = Config.load(config_path)
        catalog = _load_catalog(config, catalog_path)
        workflow = PredictionWorkflow.from_config(
            config,
            catalog=catalog,
            delay=config.analysis_delay if delay is None else delay,
        )
        workflow.select_home(home)
        workflow.select_away(away)
    except MatchupError as exc:
        logger.error("Cannot forecast %s vs %s: %s", home, away, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    prediction = asyncio.run(workflow.run())
    if prediction is None or workflow.status is not WorkflowStatus.RESOLVED:
        logger.error("Forecast did not resolve (status=%s)", workflow.status.value)
        return 1

    if as_json:
        print(json.dumps(prediction.to_dict(), indent=2, sort_keys=True))
    else:
        print(format_prediction(prediction))

    if output_path:
        path = Path(output_path)
        if path.suffix.lower() == ".json":
            write_prediction_json(prediction, str(path), run_id=run_id)
        else:
            write_predictions_csv([prediction], str(path))
        logger.info("Wrote forecast to %s", path)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NBA matchup forecast CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    teams = subparsers.add_parser("list-teams", help="Show the team catalog")
    teams.add_argument("--config", dest="config_path", help="Path to config file")
    teams.add_argument("--catalog", dest="catalog_path", help="Catalog file (.json or .csv)")

    forecast = subparsers.add_parser("predict", help="Forecast a single game")
    forecast.add_argument("--home", required=True, help="Home team code (e.g., BOS)")
    forecast.add_argument("--away", required=True, help="Away team code (e.g., LAL)")
    forecast.add_argument("--config", dest="config_path", help="Path to config file")
    forecast.add_argument("--catalog", dest="catalog_path", help="Catalog file (.json or .csv)")
    forecast.add_argument("--delay", type=float, help="Analysis delay override in seconds")
    forecast.add_argument("--output", dest="output_path", help="Write forecast to .csv or .json")
    forecast.add_argument("--json", dest="as_json", action="store_true", help="Print forecast as JSON")
    forecast.add_argument("--log-level", dest="log_level", help="Logging level (e.g., DEBUG, WARNING)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "list-teams":
        return run_list_teams(
            config_path=getattr(args, "config_path", None),
            catalog_path=getattr(args, "catalog_path", None),
        )
    if args.command == "predict":
        return run_predict(
            home=args.home,
            away=args.away,
            config_path=getattr(args, "config_path", None),
            catalog_path=getattr(args, "catalog_path", None),
            delay=getattr(args, "delay", None),
            output_path=getattr(args, "output_path", None),
            as_json=getattr(args, "as_json", False),
            log_level=getattr(args, "log_level", None),
        )

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
