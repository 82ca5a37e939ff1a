"""Run directories and JSON artifacts for CLI invocations."""

from __future__ import annotations

import json
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

DEFAULT_DATA_DIR = Path.cwd() / "data"


@dataclass(slots=True)
class RunPaths:
    run_id: str
    base_dir: Path

    def build_path(self, filename: str) -> Path:
        path = self.base_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        return path


def generate_run_id() -> str:
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{timestamp}-{secrets.token_hex(2)}"


def prepare_run_directory(run_id: str, data_dir: Optional[Path] = None) -> RunPaths:
    base_dir = (data_dir or DEFAULT_DATA_DIR) / run_id
    base_dir.mkdir(parents=True, exist_ok=True)
    return RunPaths(run_id=run_id, base_dir=base_dir)


def write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)
    return path


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
