"""Test setup for md2adf."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding markdown samples and the ADF schema."""
    return FIXTURES


@pytest.fixture
def adf_schema() -> dict:
    """JSON schema for the subset of ADF v1 that md2adf emits."""
    return json.loads((FIXTURES / "adf_schema_v1_subset.json").read_text(encoding="utf-8"))
