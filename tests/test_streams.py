"""Tests for the byte/text stream adapters."""

from __future__ import annotations

import io

from cmdrouter.streams import LineInput, TextOutput


def test_line_input_decodes_bytes_and_strips_newlines() -> None:
    reader = LineInput(io.BytesIO("1\r\nМеню\n".encode("utf-8")))

    assert reader.readline() == "1"
    assert reader.readline() == "Меню"
    assert reader.readline() is None


def test_line_input_returns_last_line_without_newline() -> None:
    reader = LineInput(io.StringIO("0"))

    assert reader.readline() == "0"
    assert reader.readline() is None


def test_line_input_replaces_undecodable_bytes() -> None:
    reader = LineInput(io.BytesIO(b"\xff\n"))

    assert reader.readline() == "�"


def test_text_output_encodes_for_binary_streams() -> None:
    sink = io.BytesIO()
    out = TextOutput(sink)

    out.write("Меню")
    out.writeline()

    assert sink.getvalue() == "Меню\n".encode("utf-8")


def test_text_output_writes_text_streams_directly() -> None:
    sink = io.StringIO()
    TextOutput(sink).writeline("hello")

    assert sink.getvalue() == "hello\n"


def test_text_output_keeps_order_with_raw_writes() -> None:
    sink = io.BytesIO()
    out = TextOutput(sink)

    out.write("menu ")
    sink.write(b"handler ")
    out.write("menu")

    assert sink.getvalue() == b"menu handler menu"
