import contextlib

import pytest

from feedback_report.errors import RaggedRowError, ReportError, TableError


@contextlib.contextmanager
def _passthrough():
    yield


def test_table_error_message_with_location(tmp_path):
    err = TableError("Invalid CSV", path=tmp_path / "in.csv", line=3)
    assert str(err) == f"{tmp_path / 'in.csv'}:3: Invalid CSV"
    assert str(TableError("Invalid CSV", path=tmp_path / "in.csv")) == f"{tmp_path / 'in.csv'}: Invalid CSV"
    assert str(TableError("Invalid CSV")) == "Invalid CSV"


def test_table_error_propagates_through_context_manager():
    with pytest.raises(TableError) as exc_info:
        with _passthrough():
            raise TableError("Invalid CSV", line=7)
    assert exc_info.value.line == 7
    assert isinstance(exc_info.value, ReportError)


def test_ragged_row_error_message():
    err = RaggedRowError(3, 1, row_number=4)
    assert str(err) == "Row 4 has 1 cell(s), expected 3 (one per header)"
