"""
Shared test fixtures for the Lab Records API tests.

This module provides:
- A small record set with a repeated lab name
- An application built around that record set
- A ``TestClient`` bound to the application
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from lab_records_api.app.core.config import Settings
from lab_records_api.app.main import create_app
from lab_records_api.app.schemas.lab_record import LabRecord
from lab_records_api.app.services.lab_record_service import LabRecordService

SAMPLE_ENTRIES = [
    {"Name": "RBC", "Value": 4.72, "Unit": "10^6/uL", "ReferenceRange": "4.50-5.90", "Date": "2023-01-12"},
    {"Name": "WBC", "Value": 6.3, "Unit": "10^3/uL", "ReferenceRange": "4.0-10.5", "Date": "2023-01-12"},
    {"Name": "RBC", "Value": 4.61, "Unit": "10^6/uL", "ReferenceRange": "4.50-5.90", "Date": "2023-06-20"},
]


@pytest.fixture
def sample_entries() -> list[dict]:
    return [dict(entry) for entry in SAMPLE_ENTRIES]


@pytest.fixture
def sample_records(sample_entries) -> list[LabRecord]:
    return [LabRecord.model_validate(entry) for entry in sample_entries]


@pytest.fixture
def service(sample_records) -> LabRecordService:
    return LabRecordService(sample_records)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="production", log_level="WARNING", log_file="")


@pytest.fixture
def client(test_settings, sample_records) -> TestClient:
    app = create_app(test_settings, records=sample_records)
    return TestClient(app)


@pytest.fixture
def write_document(tmp_path):
    """Write ``content`` to a JSON file and return its path."""

    def _write(content, name: str = "labs.json") -> str:
        path: Path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)

    return _write
