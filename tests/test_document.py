"""Tests for loading raw input into a document."""

from wrappager.model import Document


def test_empty_input_gives_empty_document():
    doc = Document.from_bytes(b"")

    assert len(doc) == 0
    assert list(doc) == []


def test_lines_are_split_on_newlines():
    doc = Document.from_bytes(b"one\ntwo\nthree")

    assert list(doc) == ["one", "two", "three"]


def test_trailing_newline_does_not_add_empty_line():
    doc = Document.from_bytes(b"one\ntwo\n")

    assert list(doc) == ["one", "two"]


def test_crlf_terminators_are_stripped():
    doc = Document.from_bytes(b"one\r\ntwo\r\n")

    assert list(doc) == ["one", "two"]


def test_blank_lines_are_kept():
    doc = Document.from_bytes(b"one\n\n\ntwo\n")

    assert list(doc) == ["one", "", "", "two"]


def test_single_newline_is_one_empty_line():
    doc = Document.from_bytes(b"\n")

    assert list(doc) == [""]


def test_invalid_utf8_is_replaced():
    doc = Document.from_bytes(b"caf\xc3\xa9 \xff\xfe ok\n")

    assert len(doc) == 1
    assert doc[0].startswith("café ")
    assert "�" in doc[0]
    assert doc[0].endswith(" ok")


def test_document_is_immutable_sequence():
    doc = Document(["a", "b", "c"])

    assert doc[1] == "b"
    assert doc[1:] == ("b", "c")
    assert doc.lines == ("a", "b", "c")
    assert not hasattr(doc, "append")


def test_carriage_return_without_newline_is_kept():
    assert list(Document.from_bytes(b"a\r")) == ["a\r"]
    assert list(Document.from_bytes(b"one\r\ntwo\r")) == ["one", "two\r"]


def test_mixed_terminators():
    doc = Document.from_bytes(b"one\r\ntwo\nthree\r\n")

    assert list(doc) == ["one", "two", "three"]
