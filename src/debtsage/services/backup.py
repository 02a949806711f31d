"""Backup file import/export.

Backups are the JSON documents the web app exports: camelCase keys with
``version``, ``debts``, ``strategy``, ``settings`` and ``payments``, plus an
optional ``budget`` block holding income sources. Keys are converted to the
snake_case field names of the models on the way in and back on the way out.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError
from pydantic.alias_generators import to_camel, to_snake

from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.income import BudgetSettings
from ..models.strategy import StrategySettings

logger = get_logger(__name__)

CURRENT_VERSION = "1.0.0"

# Keys whose camelCase form does not follow the generic conversion.
_SPECIAL_KEYS = {"retirement401k": "retirement_401k"}
_SPECIAL_KEYS_REVERSED = {v: k for k, v in _SPECIAL_KEYS.items()}


class BackupFormatError(ValueError):
    """Backup content is not valid JSON or lacks the required structure."""


@dataclass(slots=True)
class UserSettings:
    user_name: str = ""
    currency: str = "USD"
    date_format: str = "MM/DD/YYYY"


@dataclass(slots=True)
class AppData:
    """Everything a backup file carries."""

    debts: list[Debt]
    strategy: StrategySettings
    settings: UserSettings = field(default_factory=UserSettings)
    budget: BudgetSettings = field(default_factory=BudgetSettings)
    payments: list[dict[str, Any]] = field(default_factory=list)
    version: str = CURRENT_VERSION
    exported_at: str | None = None

    def find_debt(self, debt_id: str) -> Debt | None:
        return next((d for d in self.debts if d.id == debt_id), None)


def _to_snake(key: str) -> str:
    if key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[key]
    return to_snake(key)


def _to_camel(key: str) -> str:
    if key in _SPECIAL_KEYS_REVERSED:
        return _SPECIAL_KEYS_REVERSED[key]
    return to_camel(key)


def _convert_keys(value: Any, convert) -> Any:
    if isinstance(value, Mapping):
        return {convert(k): _convert_keys(v, convert) for k, v in value.items()}
    if isinstance(value, list):
        return [_convert_keys(v, convert) for v in value]
    return value


def _validate_structure(data: Any) -> None:
    if not isinstance(data, Mapping):
        raise BackupFormatError("Invalid file format: expected a JSON object.")
    if not isinstance(data.get("debts"), list):
        raise BackupFormatError("Invalid file format: 'debts' must be a list.")
    if not isinstance(data.get("strategy"), Mapping):
        raise BackupFormatError("Invalid file format: 'strategy' must be an object.")
    for key in ("settings", "budget"):
        if data.get(key) is not None and not isinstance(data[key], Mapping):
            raise BackupFormatError(f"Invalid file format: '{key}' must be an object.")
    if data.get("payments") is not None and not isinstance(data["payments"], list):
        raise BackupFormatError("Invalid file format: 'payments' must be a list.")


def _migrate(data: Mapping[str, Any], default_strategy: str) -> dict[str, Any]:
    """Fill fields missing from older backups."""

    migrated = dict(data)
    migrated["strategy"] = {"strategy": default_strategy, **data["strategy"]}
    migrated.setdefault("version", CURRENT_VERSION)
    if not migrated.get("payments"):
        migrated["payments"] = []
    if not migrated.get("settings"):
        migrated["settings"] = {}
    return migrated


def parse_backup(data: Any, *, default_strategy: str = "avalanche") -> AppData:
    """Validate, migrate and convert a decoded backup document."""

    _validate_structure(data)
    migrated = _convert_keys(_migrate(data, default_strategy), _to_snake)

    settings_raw = migrated["settings"]
    try:
        debts = [Debt.model_validate(raw) for raw in migrated["debts"]]
        strategy = StrategySettings.model_validate(migrated["strategy"])
        budget = BudgetSettings.model_validate(migrated.get("budget") or {})
    except ValidationError as exc:
        raise BackupFormatError(f"Invalid backup contents: {exc}") from exc

    settings = UserSettings(
        user_name=str(settings_raw.get("user_name", "")),
        currency=str(settings_raw.get("currency", "USD")),
        date_format=str(settings_raw.get("date_format", "MM/DD/YYYY")),
    )

    return AppData(
        debts=debts,
        strategy=strategy,
        settings=settings,
        budget=budget,
        payments=list(migrated["payments"]),
        version=str(migrated["version"]),
        exported_at=migrated.get("exported_at"),
    )


def load_backup(path: Path, *, default_strategy: str = "avalanche") -> AppData:
    """Read and parse a backup file.

    ``default_strategy`` applies when the strategy block names none.
    """

    try:
        content = Path(path).read_bytes()
    except OSError as exc:
        raise BackupFormatError(f"Failed to read file: {path}") from exc
    try:
        document = json.loads(content.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BackupFormatError("Failed to parse file. Please select a valid JSON file.") from exc

    app_data = parse_backup(document, default_strategy=default_strategy)
    logger.info(
        "Backup loaded",
        extra={"path": str(path), "debts": len(app_data.debts), "version": app_data.version},
    )
    return app_data


def export_backup(data: AppData, output_path: Path) -> Path:
    """Write ``data`` as a camelCase backup document and return the path."""

    document = {
        "version": data.version,
        "debts": [d.model_dump(mode="json") for d in data.debts],
        "payments": data.payments,
        "strategy": data.strategy.model_dump(mode="json"),
        "settings": {
            "user_name": data.settings.user_name,
            "currency": data.settings.currency,
            "date_format": data.settings.date_format,
        },
        "budget": data.budget.model_dump(mode="json"),
        "exported_at": datetime.now(timezone.utc).isoformat(),
    }

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        json.dump(_convert_keys(document, _to_camel), fh, indent=2)
    return output_path
