import os
import stat

import pytest

from feedback_report.errors import TableError
from feedback_report.table_io import load_table, write_document


def test_load_table_parses_rows(tmp_path):
    path = tmp_path / "in.csv"
    path.write_text("Name,Comment\nAlice,Nice\nBob,\"Long, quoted\"\n", encoding="utf-8")
    assert load_table(path) == [
        ["Name", "Comment"],
        ["Alice", "Nice"],
        ["Bob", "Long, quoted"],
    ]


def test_load_table_keeps_newlines_in_quoted_cells(tmp_path):
    path = tmp_path / "in.csv"
    path.write_bytes(b'Name,Comment\nAlice,"one\ntwo"\n')
    assert load_table(path)[1] == ["Alice", "one\ntwo"]


def test_load_table_drops_utf8_bom(tmp_path):
    path = tmp_path / "in.csv"
    path.write_bytes("Name,Comment\nZoë,ok\n".encode("utf-8-sig"))
    rows = load_table(path)
    assert rows[0] == ["Name", "Comment"]
    assert rows[1] == ["Zoë", "ok"]


def test_load_table_blank_lines(tmp_path):
    path = tmp_path / "in.csv"
    path.write_text("Name\n\nAlice\n\n", encoding="utf-8")
    assert load_table(path) == [["Name"], ["Alice"]]
    assert load_table(path, skip_blank_rows=False) == [["Name"], [], ["Alice"], []]


def test_load_table_custom_delimiter_and_encoding(tmp_path):
    path = tmp_path / "in.csv"
    path.write_bytes("Name;Stadt\nPaul;Montréal\n".encode("latin-1"))
    assert load_table(path, encoding="latin-1", delimiter=";") == [
        ["Name", "Stadt"],
        ["Paul", "Montréal"],
    ]


def test_load_table_empty_file(tmp_path):
    path = tmp_path / "in.csv"
    path.write_text("", encoding="utf-8")
    assert load_table(path) == []


def test_load_table_wraps_parser_errors(tmp_path):
    path = tmp_path / "in.csv"
    path.write_text("Name\n" + "x" * 200_000 + "\n", encoding="utf-8")
    with pytest.raises(TableError) as exc_info:
        load_table(path)
    assert exc_info.value.path == path
    assert str(exc_info.value).startswith(f"{path}:")


def test_load_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_table(tmp_path / "missing.csv")


def test_write_document_creates_and_replaces(tmp_path):
    umask = os.umask(0o022)
    try:
        path = tmp_path / "out" / "report.html"
        write_document(path, "first")
    finally:
        os.umask(umask)
    assert path.read_text(encoding="utf-8") == "first"
    assert stat.S_IMODE(path.stat().st_mode) == 0o644

    write_document(path, "<p>Zoë</p>\n")
    assert path.read_bytes() == "<p>Zoë</p>\n".encode("utf-8")
    assert sorted(p.name for p in path.parent.iterdir()) == ["report.html"]


def test_write_document_keeps_existing_mode(tmp_path):
    path = tmp_path / "report.html"
    path.write_text("old", encoding="utf-8")
    path.chmod(0o640)

    write_document(path, "new")

    assert path.read_text(encoding="utf-8") == "new"
    assert stat.S_IMODE(path.stat().st_mode) == 0o640


def test_write_document_cleans_up_on_failure(tmp_path):
    path = tmp_path / "report.html"
    with pytest.raises(UnicodeEncodeError):
        write_document(path, "bad \udcff surrogate")
    assert list(tmp_path.iterdir()) == []


def test_load_table_preserves_crlf_inside_quoted_cells(tmp_path):
    path = tmp_path / "in.csv"
    path.write_bytes(b'Name\r\n"a\r\nb"\r\n')
    assert load_table(path) == [["Name"], ["a\r\nb"]]


def test_load_table_skips_whitespace_only_lines(tmp_path):
    path = tmp_path / "in.csv"
    path.write_text("Name,Comment\n   \nAlice,ok\n\t\n", encoding="utf-8")
    assert load_table(path) == [["Name", "Comment"], ["Alice", "ok"]]
    assert load_table(path, skip_blank_rows=False)[1] == ["   "]


def test_load_table_keeps_rows_of_empty_cells(tmp_path):
    path = tmp_path / "in.csv"
    path.write_text("Name,Comment\n,\n", encoding="utf-8")
    assert load_table(path) == [["Name", "Comment"], ["", ""]]
