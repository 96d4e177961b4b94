from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import List

from models import DecisionState

logger = logging.getLogger(__name__)

DATA_DIR = Path(os.environ.get("DECISION_DATA_DIR", "data"))


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def slugify(name: str) -> str:
    cleaned = re.sub(r"[^a-zA-Z0-9_-]+", "-", name.strip()).strip("-")
    return cleaned.lower() or "decision"


def decision_path(name: str) -> Path:
    ensure_data_dir()
    return DATA_DIR / f"{slugify(name)}.json"


def list_decisions() -> List[str]:
    ensure_data_dir()
    return sorted(path.stem for path in DATA_DIR.glob("*.json"))


def export_state(state: DecisionState, path: Path) -> Path:
    path = Path(path)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(state.to_dict(), handle, indent=2)
    logger.info("Saved decision to %s", path)
    return path


def import_state(path: Path) -> DecisionState:
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    logger.info("Loaded decision from %s", path)
    return DecisionState.from_dict(data)


def save_decision(name: str, state: DecisionState) -> Path:
    return export_state(state, decision_path(name))


def load_decision(name: str) -> DecisionState | None:
    path = decision_path(name)
    if not path.exists():
        return None
    return import_state(path)
