import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from db.models import VoltageRegulator
from import_engine import run_import
from import_engine.row_processor import RowProcessor

HEADER = (
    "lcsc,mfr,package,output_type,is_low_dropout,is_positive,"
    "output_voltage_min,output_voltage_max,output_current_max,dropout_voltage,"
    "input_voltage_min,input_voltage_max,quiescent_current,stock,price1\n"
)


@pytest.fixture
def rows(db_session):
    def _rows():
        db_session.rollback()
        return {r.lcsc: r for r in db_session.scalars(select(VoltageRegulator))}
    return _rows


def test_import_valid_rows(rows):
    csv_data = HEADER + (
        "C6186,AMS1117-3.3,SOT-223,fixed,1,1,3.3,3.3,1,1.1,4.5,15,0.005,1200000,0.0412\n"
        "8585,LM317,TO-252,Adjustable,false,true,1.25,37,1.5,,3,40,,30000,0.12\n"
    )
    report = run_import(csv_data)
    assert report.to_dict() == {"total_rows": 2, "imported": 2, "skipped": 0, "errors": []}

    imported = rows()
    assert imported[6186].is_low_dropout == 1
    assert imported[6186].price1 == pytest.approx(0.0412)
    assert imported[8585].output_type == "adjustable"
    assert imported[8585].is_low_dropout == 0
    assert imported[8585].dropout_voltage is None
    assert imported[8585].stock == 30000


def test_bom_and_header_whitespace_are_tolerated(rows):
    csv_data = b"\xef\xbb\xbf" + (
        " LCSC , Output_Type \nC1,fixed\n"
    ).encode("utf-8")
    report = run_import(csv_data)
    assert report.imported == 1
    assert 1 in rows()


@pytest.mark.parametrize("line, reason", [
    ("X12,M,SOT-23,fixed,1,1,3.3,3.3,,,,,,1,0.1", "Bad LCSC"),
    ("C12,M,SOT-23,switching,1,1,3.3,3.3,,,,,,1,0.1", "Unknown output_type"),
    ("C12,M,SOT-23,fixed,maybe,1,3.3,3.3,,,,,,1,0.1", "Bad boolean"),
    ("C12,M,SOT-23,fixed,1,1,abc,3.3,,,,,,1,0.1", "Bad number"),
    ("C12,M,SOT-23,fixed,1,1,nan,3.3,,,,,,1,0.1", "Non-finite number"),
    ("C12,M,SOT-23,fixed,1,1,3.3,3.3,,,,,,inf,0.1", "Non-finite number"),
    ("C12,M,SOT-23,fixed,1,1,5,3.3,,,,,,1,0.1", "exceeds output_voltage_max"),
    (",M,SOT-23,fixed,1,1,3.3,3.3,,,,,,1,0.1", "Missing required column lcsc"),
])
def test_bad_rows_are_reported_and_skipped(rows, line, reason):
    report = run_import(HEADER + line + "\n" + "C99,OK,SOT-23,fixed,1,1,3.3,3.3,,,,,,5,0.1\n")
    assert report.total_rows == 2
    assert report.imported == 1
    assert report.skipped == 1
    assert report.errors[0]["row"] == 2
    assert reason in report.errors[0]["reason"]
    assert list(rows()) == [99]


def test_duplicates_need_replace(rows):
    first = HEADER + "C7,OLD,SOT-23,fixed,1,1,3.3,3.3,,,,,,10,0.1\n"
    second = HEADER + "C7,NEW,SOT-89,fixed,1,1,5,5,,,,,,20,0.2\n"

    assert run_import(first).imported == 1
    report = run_import(second)
    assert report.imported == 0
    assert "Duplicate LCSC C7" in report.errors[0]["reason"]
    assert rows()[7].mfr == "OLD"

    report = run_import(second, replace_existing=True)
    assert report.imported == 1
    assert rows()[7].mfr == "NEW"


def test_duplicate_within_one_file(rows):
    csv_data = HEADER + (
        "C7,A,SOT-23,fixed,1,1,3.3,3.3,,,,,,10,0.1\n"
        "C7,B,SOT-23,fixed,1,1,3.3,3.3,,,,,,10,0.1\n"
    )
    report = run_import(csv_data, replace_existing=True)
    assert report.imported == 1
    assert report.errors == [{"row": 3, "reason": "Duplicate LCSC C7 within this file"}]


def test_empty_content(db_session):
    report = run_import(b"")
    assert report.errors == [{"row": 0, "reason": "CSV has no header row or is empty"}]


def test_header_without_required_columns(db_session):
    report = run_import("mfr,package\nAMS1117,SOT-223\n")
    assert report.total_rows == 0
    assert "lcsc, output_type" in report.errors[0]["reason"]


def test_database_failure_discards_whole_batch(rows, monkeypatch):
    original = RowProcessor.process

    def failing(self, session, row, replace):
        if row["lcsc"] == "C13":
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))
        return original(self, session, row, replace)

    monkeypatch.setattr(RowProcessor, "process", failing)
    csv_data = HEADER + (
        "C11,A,SOT-23,fixed,1,1,3.3,3.3,,,,,,10,0.1\n"
        "C12,B,SOT-23,bogus,1,1,3.3,3.3,,,,,,10,0.1\n"
        "C13,C,SOT-23,fixed,1,1,3.3,3.3,,,,,,10,0.1\n"
    )
    report = run_import(csv_data)
    assert report.total_rows == 3
    assert report.imported == 0
    assert report.skipped == 0
    assert report.aborted.startswith("Fatal import error")
    assert [e["row"] for e in report.errors] == [0]
    assert rows() == {}
