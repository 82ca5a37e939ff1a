"""Command-line interface for form discovery, analysis and autofill."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from .analysis_client import AnalysisClient
from .browser import BrowserConfig, BrowserSession
from .config import load_config
from .form_detection import discover_forms
from .form_models import AnalysisResult
from .io_utils import generate_run_id, prepare_run_directory, read_json, write_json
from .logging_utils import build_logger
from .messaging import FILL_FORM, START_ANALYSIS, MessageDispatcher
from .page_utils import capture_screenshot
from .session import AnalysisSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Discover web forms, request recommendations and autofill them"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--url", required=True, help="Page to open")
    common.add_argument("--run-id", dest="run_id", help="Optional run identifier")
    common.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    common.add_argument(
        "--headed", action="store_true", help="Show the browser window"
    )

    subparsers.add_parser(
        "discover", help="List the form groups found on the page", parents=[common]
    )
    subparsers.add_parser(
        "analyze", help="Send the page's forms to the analysis service", parents=[common]
    )
    fill_parser = subparsers.add_parser(
        "fill", help="Apply a saved analysis to the page", parents=[common]
    )
    fill_parser.add_argument(
        "--analysis",
        type=Path,
        required=True,
        help="analysis.json written by a previous analyze run",
    )
    subparsers.add_parser(
        "autofill", help="Analyze the page and fill it in one go", parents=[common]
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    run_id = args.run_id or generate_run_id()
    run_paths = prepare_run_directory(run_id)
    logger = build_logger(run_paths, verbose=args.verbose)
    config = load_config()

    session = AnalysisSession(
        AnalysisClient(config.service, logger=logger),
        screenshot=lambda page: capture_screenshot(page, config.capture, logger),
        logger=logger,
    )

    with BrowserSession(BrowserConfig(headless=not args.headed)) as browser:
        page = browser.open(args.url, logger=logger)
        dispatcher = MessageDispatcher(session, lambda: page, logger=logger)

        if args.command == "discover":
            groups = discover_forms(page, logger=logger)
            result = {"forms": [group.to_dict() for group in groups]}
        elif args.command == "analyze":
            result = dispatcher.handle({"action": START_ANALYSIS})
            if result["success"]:
                write_json(run_paths.build_path("analysis.json"), result["analysis"])
        elif args.command == "fill":
            session.restore(AnalysisResult.from_payload(read_json(args.analysis)))
            result = dispatcher.handle({"action": FILL_FORM})
        elif args.command == "autofill":
            analysis = dispatcher.handle({"action": START_ANALYSIS})
            if analysis["success"]:
                write_json(run_paths.build_path("analysis.json"), analysis["analysis"])
                result = dispatcher.handle({"action": FILL_FORM})
            else:
                result = analysis
        else:
            parser.error(f"Unknown command: {args.command}")

    write_json(run_paths.build_path(f"{args.command}.json"), result)
    print(json.dumps(result, indent=2))
    if not result.get("success", True):
        raise SystemExit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
