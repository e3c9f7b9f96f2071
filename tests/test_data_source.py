from __future__ import annotations

import pytest
from pydantic import ValidationError

from lab_records_api.app.core.data_source import DataSourceError, load_lab_records
from lab_records_api.app.schemas.lab_record import LabRecord


def test_loads_records_in_document_order(write_document, sample_entries) -> None:
    records = load_lab_records(write_document({"LabRecords": sample_entries}))
    assert isinstance(records, tuple)
    assert [r.name for r in records] == ["RBC", "WBC", "RBC"]
    assert records[0].value == 4.72
    assert records[0].reference_range == "4.50-5.90"
    assert records[2].date == "2023-06-20"


def test_missing_section_yields_no_records(write_document) -> None:
    assert load_lab_records(write_document({"Other": []})) == ()


def test_null_section_yields_no_records(write_document) -> None:
    assert load_lab_records(write_document({"LabRecords": None})) == ()


def test_unknown_fields_are_ignored(write_document) -> None:
    records = load_lab_records(write_document({"LabRecords": [{"Name": "RBC", "Comment": "x"}]}))
    assert records == (LabRecord(name="RBC"),)


def test_text_values_pass_through(write_document) -> None:
    records = load_lab_records(write_document({"LabRecords": [{"Name": "HIV Screen", "Value": "Non-reactive"}]}))
    assert records[0].value == "Non-reactive"


@pytest.mark.parametrize("value", [251, 0, True, False, 4.72, "<5"])
def test_values_keep_their_json_type(write_document, value) -> None:
    record = load_lab_records(write_document({"LabRecords": [{"Name": "P", "Value": value}]}))[0]
    assert record.value == value
    assert type(record.value) is type(value)


@pytest.mark.parametrize("date", ["2023-01-12", "2023-01-12T08:30:00", "2023-01-12T08:30:00Z", "Jan 2023"])
def test_dates_keep_their_text(write_document, date) -> None:
    record = load_lab_records(write_document({"LabRecords": [{"Name": "RBC", "Date": date}]}))[0]
    assert record.date == date


def test_missing_file(tmp_path) -> None:
    path = str(tmp_path / "absent.json")
    with pytest.raises(DataSourceError) as excinfo:
        load_lab_records(path)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, OSError)


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        {"LabRecords": {"Name": "RBC"}},
        {"LabRecords": [{"Value": 1.0}]},
        {"LabRecords": [42]},
    ],
)
def test_malformed_documents_are_rejected(write_document, content) -> None:
    with pytest.raises(DataSourceError):
        load_lab_records(write_document(content))


def test_bundled_document_loads() -> None:
    from lab_records_api.app.core.config import Settings

    records = load_lab_records(Settings(data_file="mockdata.json").get_data_path())
    assert any(r.name == "RBC" for r in records)


def test_records_are_frozen(write_document, sample_entries) -> None:
    record = load_lab_records(write_document({"LabRecords": sample_entries}))[0]
    with pytest.raises(ValidationError):
        record.name = "WBC"
    assert record.name == "RBC"
