from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from workday_cli.core.models import DayType


class FakeClassifier:
    """Records every lookup and answers from a fixed table."""

    def __init__(self, answers: Dict[date, DayType] | None = None, default: DayType = DayType.WORKING) -> None:
        self.answers = dict(answers or {})
        self.default = default
        self.calls: List[date] = []

    def classify(self, day: date) -> DayType:
        self.calls.append(day)
        return self.answers.get(day, self.default)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def fake_classifier() -> FakeClassifier:
    return FakeClassifier()


@pytest.fixture()
def classifier_factory():
    return FakeClassifier


@pytest.fixture()
def workday_payload() -> Dict[str, Any]:
    return {
        "code": 0,
        "type": {"type": 0, "name": "周二", "week": 2},
        "holiday": None,
    }


@pytest.fixture()
def makeup_workday_payload() -> Dict[str, Any]:
    return {
        "code": 0,
        "type": {"type": 3, "name": "国庆节后补班", "week": 6},
        "holiday": {"holiday": False, "name": "国庆节后补班", "wage": 1, "target": "国庆节"},
    }


@pytest.fixture()
def holiday_payload() -> Dict[str, Any]:
    return {
        "code": 0,
        "type": {"type": 2, "name": "国庆节", "week": 3},
        "holiday": {"holiday": True, "name": "国庆节", "wage": 3},
    }


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write
