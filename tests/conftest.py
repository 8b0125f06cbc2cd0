"""Pytest configuration and shared row fixtures.

A ``.bulkq_env`` file at the project root, when present, is loaded before
anything else so that test runs never pick up production settings.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_ENV_FILE = Path(__file__).parent.parent / ".bulkq_env"
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

import pytest

from bulk_queries.config import get_settings


@dataclass
class SampleRecord:
    """Row shape used across generator and executor tests."""

    TextCol: str
    NumberCol: Decimal
    BoolCol: bool
    Id: Optional[int] = None


@pytest.fixture
def sample_records() -> List[SampleRecord]:
    return [
        SampleRecord(Id=1, TextCol="aaa", NumberCol=Decimal("1.23"), BoolCol=True),
        SampleRecord(Id=2, TextCol="bbb", NumberCol=Decimal("4.56"), BoolCol=False),
        SampleRecord(Id=3, TextCol="ccc", NumberCol=Decimal("7"), BoolCol=True),
    ]


@pytest.fixture
def text_rows() -> List[dict]:
    return [
        {"Id": 1, "Text": "aaa"},
        {"Id": 2, "Text": "bbb"},
        {"Id": 3, "Text": "ccc"},
    ]


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear cached settings before and after a test that changes env vars."""
    for var in (
        "LOG_LEVEL",
        "DATABASE_URL",
        "DB_BATCH_SIZE",
        "BULKQ_DATABASE_ENGINE",
        "BULKQ_PARAM_PREFIX",
        "BULKQ_STRICT_CONFLICT_POLICY",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
