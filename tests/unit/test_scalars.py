"""Tests for scalar rendering: floats, strings and resources."""

import io
import math
import socket

import pytest

from value_exporter.core.scalars import (
    export_float,
    export_int,
    export_resource,
    export_string,
    shorten,
)


class TestExportFloat:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1.0, "1.0"),
            (2.0, "2.0"),
            (2.5, "2.5"),
            (1.2, "1.2"),
            (-0.5, "-0.5"),
            (1 / 3, "0.3333333333333333"),
            (1 - 2 / 3, "0.33333333333333337"),
            (5.5e123, "5.5E+123"),
            (5.5e-123, "5.5E-123"),
            (1e16, "1.0E+16"),
            (1e-7, "1.0E-7"),
            (math.nan, "NAN"),
            (math.inf, "INF"),
            (-math.inf, "-INF"),
        ],
    )
    def test_rendering(self, value, expected):
        assert export_float(value) == expected

    @pytest.mark.parametrize("value", [1 / 3, 0.1 + 0.2, 123456.789e-30, 2.0**60])
    def test_round_trips(self, value):
        assert float(export_float(value)) == value


class TestExportString:
    def test_plain(self):
        assert export_string("1") == "'1'"

    def test_empty(self):
        assert export_string("") == "''"

    def test_quotes_are_not_escaped(self):
        assert export_string("cast('foo' as blob)") == "'cast('foo' as blob)'"

    def test_line_breaks_are_spelled_out(self, multiline_text):
        expected = (
            "'this\\n\nis\\n\na\\n\nvery\\n\nvery\\n\nvery\\n\nvery\\n\nvery\\n\n"
            "very\\r\nlong\\n\\r\ntext'"
        )
        assert export_string(multiline_text) == expected

    def test_crlf(self):
        assert export_string("Test\r\n") == "'Test\\r\\n\n'"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("".join(map(chr, range(6))), "Binary String: 0x000102030405"),
            (
                "".join(map(chr, range(0x0E, 0x20))),
                "Binary String: 0x0e0f101112131415161718191a1b1c1d1e1f",
            ),
            ("\x00\x09", "Binary String: 0x0009"),
            (b"\x00\x01", "Binary String: 0x0001"),
            (bytearray(b"\x1b"), "Binary String: 0x1b"),
        ],
    )
    def test_binary(self, value, expected):
        assert export_string(value) == expected

    @pytest.mark.parametrize(
        ("value", "length"),
        [
            ("".join(map(chr, range(0x09, 0x0E))), 9),
            ("".join(map(chr, range(0x20, 0x80))), 96),
            ("".join(map(chr, range(0x80, 0x100))), 128),
            ("🧪" * 5, 5),
        ],
    )
    def test_non_binary_text(self, value, length):
        rendered = export_string(value)
        assert rendered.startswith("'") and rendered.endswith("'")
        assert len(rendered) == length + 2

    def test_text_bytes(self):
        assert export_string("héllo".encode()) == "'héllo'"

    def test_high_bytes_are_not_binary(self):
        assert not export_string(bytes(range(0x80, 0x100))).startswith("Binary")


class TestShorten:
    def test_short_text_is_kept(self):
        assert shorten("'abc'", 40) == "'abc'"

    def test_newlines_are_removed(self):
        assert shorten("'a\\n\nb'", 40) == "'a\\nb'"

    def test_head_and_tail(self):
        text = "'" + "A" * 39 + "'"
        assert shorten(text, 40) == "'" + "A" * 29 + "..." + "A" * 6 + "'"

    def test_custom_maximum(self):
        text = "'" + "A" * 21 + "'"
        assert shorten(text, 20) == "'" + "A" * 9 + "..." + "A" * 6 + "'"

    @pytest.mark.parametrize("max_length", [1, 2, 5, 9, 10, 11, 40])
    def test_bounded(self, max_length):
        assert len(shorten("x" * 100, max_length)) <= max_length + 3


class TestExportResource:
    def test_open_file(self, tmp_path):
        with open(tmp_path / "data.txt", "w") as f:
            assert export_resource(f) == f"resource({f.fileno()}) of type (stream)"

    def test_closed_file(self, tmp_path):
        f = open(tmp_path / "data.txt", "w")
        f.close()
        assert export_resource(f) == "resource (closed)"

    def test_socket(self):
        sock = socket.socket()
        try:
            assert export_resource(sock) == (
                f"resource({sock.fileno()}) of type (socket)"
            )
        finally:
            sock.close()
        assert export_resource(sock) == "resource (closed)"

    def test_stream_without_descriptor_falls_back_to_repr(self):
        stream = io.BytesIO()
        assert export_resource(stream) == repr(stream)

    def test_detached_wrapper_falls_back_to_repr(self):
        wrapper = io.TextIOWrapper(io.BytesIO())
        wrapper.detach()
        assert export_resource(wrapper) == repr(wrapper)


class TestExportInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, "0"), (7, "7"), (-42, "-42"), (10**20, "100000000000000000000")],
    )
    def test_small(self, value, expected):
        assert export_int(value) == expected

    def test_beyond_string_conversion_limit(self):
        assert export_int(10**5000) == "1" + "0" * 5000

    def test_negative_beyond_string_conversion_limit(self):
        assert export_int(-(10**5000 - 1)) == "-" + "9" * 5000

    def test_inner_chunks_keep_leading_zeros(self):
        value = 10**2500 + 7
        assert export_int(value) == "1" + "0" * 2499 + "7"
