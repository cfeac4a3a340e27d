from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from bodsify.config import PublicationConfig

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def report_path() -> Path:
    return DATA_DIR / "ahu_report.json"


@pytest.fixture(scope="session")
def report_payload(report_path: Path) -> dict[str, Any]:
    with report_path.open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def as_of() -> datetime:
    return datetime(2024, 3, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def publication() -> PublicationConfig:
    return PublicationConfig(id_prefix="test")


@pytest.fixture(autouse=True)
def _clear_bodsify_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BODSIFY_PUBLISHER_NAME",
        "BODSIFY_SOURCE_URL",
        "BODSIFY_BODS_VERSION",
        "BODSIFY_ID_PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)
