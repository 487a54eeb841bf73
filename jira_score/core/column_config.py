"""Load and expose table column configuration from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import BREAKDOWN_COLUMNS, TICKET_LIST_COLUMNS

logger = logging.getLogger(__name__)

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "ticket_list": list(TICKET_LIST_COLUMNS),
        "breakdown": list(BREAKDOWN_COLUMNS),
    }


def load_column_sets(base_path: str | Path | None = None, *, reload: bool = False) -> dict[str, list[str]]:
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    sets = _defaults()
    if yaml_path.exists():
        try:
            data = yaml.safe_load(yaml_path.read_text()) or {}
        except yaml.YAMLError as exc:
            logger.warning("Ignoring invalid %s: %s", yaml_path, exc)
            data = {}
        for name, cols in (data.get("sets") or {}).items():
            if isinstance(cols, list) and cols:
                sets[name] = [str(c) for c in cols]
    _CACHE = sets
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])
