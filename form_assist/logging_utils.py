"""Logging helpers."""

from __future__ import annotations

import logging

from .io_utils import RunPaths

PACKAGE_LOGGER = "form_assist"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_logger(run_paths: RunPaths, verbose: bool = False) -> logging.Logger:
    """Route every ``form_assist.*`` logger to the console and the run log.

    Module-level ``logging.getLogger(__name__)`` fallbacks propagate to the
    package logger, so they land in ``form_assist.log`` next to the run's own
    messages. Handlers from a previous run are replaced.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S")
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    file_handler = logging.FileHandler(
        run_paths.base_dir / "form_assist.log", encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    package_logger.addHandler(file_handler)

    return logging.getLogger(f"{PACKAGE_LOGGER}.run.{run_paths.run_id}")
