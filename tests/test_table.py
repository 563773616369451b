import logging

import pytest

from responder.errors import MalformedInputError
from responder.table import ResponseTable, build_response_map


def test_every_key_in_header_maps_to_response():
    mapping = build_response_map("hello, hi\nHi there!\n".splitlines())

    assert mapping == {"hello": "Hi there!", "hi": "Hi there!"}


def test_records_split_on_single_blank_line():
    mapping = build_response_map("bye\nSee you!\n\nthanks\nYou're welcome!\n".splitlines())

    assert mapping["bye"] == "See you!"
    assert mapping["thanks"] == "You're welcome!"


def test_multiline_response_is_joined_and_trimmed():
    lines = ["slow,  performance ", "   Upgrade your processor.", "Then try again.   "]

    mapping = build_response_map(lines)

    assert mapping["performance"] == "Upgrade your processor.\nThen try again."
    assert mapping["slow"] == mapping["performance"]


def test_keys_are_case_sensitive():
    table = ResponseTable.from_lines(["Status", "ok"])

    assert table.match("Status") == "ok"
    assert table.match("status") is None


def test_later_record_overwrites_repeated_key():
    mapping = build_response_map(["a, b", "first", "", "b", "second"])

    assert mapping == {"a": "first", "b": "second"}


def test_header_without_response_is_dropped():
    mapping = build_response_map(["lonely"])

    assert mapping == {}


def test_header_keeps_waiting_across_one_blank_line():
    mapping = build_response_map(["hello", "", "Hi there!"])

    assert mapping == {"hello": "Hi there!"}


def test_trailing_comma_yields_empty_key():
    mapping = build_response_map(["a,", "text"])

    assert mapping == {"a": "text", "": "text"}


def test_whitespace_only_lines_count_as_blank():
    with pytest.raises(MalformedInputError) as excinfo:
        build_response_map(["a", "text1", "   ", "\t", "text2"])

    assert excinfo.value.line_number == 4
    assert excinfo.value.partial == {"a": "text1"}


def test_consecutive_blank_lines_are_rejected():
    with pytest.raises(MalformedInputError):
        build_response_map("a\ntext1\n\n\ntext2\n".splitlines())


def test_from_path_reads_file(tmp_path):
    sample = tmp_path / "responses.txt"
    sample.write_text("bug, crash\nAll software has bugs.\n", encoding="ascii")

    table = ResponseTable.from_path(sample)

    assert len(table) == 2
    assert "crash" in table
    assert table.keywords() == {"bug": "All software has bugs.", "crash": "All software has bugs."}


def test_missing_file_leaves_table_empty(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="responder.table"):
        table = ResponseTable.from_path(tmp_path / "absent.txt")

    assert len(table) == 0
    assert "absent.txt" in caplog.text


def test_non_ascii_file_is_treated_as_unavailable(tmp_path):
    sample = tmp_path / "responses.txt"
    sample.write_bytes("café\nbonjour\n".encode("utf-8"))

    table = ResponseTable.from_path(sample)

    assert len(table) == 0


def test_unknown_encoding_is_treated_as_unavailable(tmp_path, caplog):
    sample = tmp_path / "responses.txt"
    sample.write_text("hello\nHi!\n", encoding="ascii")

    with caplog.at_level(logging.ERROR, logger="responder.table"):
        table = ResponseTable.from_path(sample, encoding="latin-9x")

    assert len(table) == 0
    assert "unknown encoding latin-9x" in caplog.text


def test_crlf_line_endings_are_stripped(tmp_path):
    sample = tmp_path / "responses.txt"
    sample.write_bytes(b"hello, hi\r\nHi there!\r\nHow are you?\r\n\r\nbye\r\nSee you!\r\n")

    table = ResponseTable.from_path(sample)

    assert table.keywords() == {
        "hello": "Hi there!\nHow are you?",
        "hi": "Hi there!\nHow are you?",
        "bye": "See you!",
    }


def test_lenient_mode_keeps_partial_table(tmp_path, caplog):
    sample = tmp_path / "responses.txt"
    sample.write_text("a\ntext1\n\n\nb\ntext2\n", encoding="ascii")

    with pytest.raises(MalformedInputError):
        ResponseTable.from_path(sample)

    with caplog.at_level(logging.WARNING, logger="responder.table"):
        table = ResponseTable.from_path(sample, strict=False)

    assert table.keywords() == {"a": "text1"}
    assert "consecutive blank lines" in caplog.text
