"""Pytest configuration and fixtures."""

import pytest
from python_multipart.multipart import MultipartParser


def _parse(boundary: str, body: bytes) -> list[dict]:
    parts: list[dict] = []
    state: dict = {}

    def on_part_begin():
        state["part"] = {"headers": {}, "data": b""}
        state["field"] = b""
        state["value"] = b""

    def on_header_field(data, start, end):
        state["field"] += data[start:end]

    def on_header_value(data, start, end):
        state["value"] += data[start:end]

    def on_header_end():
        name = state["field"].decode("utf-8").lower()
        state["part"]["headers"][name] = state["value"].decode("utf-8")
        state["field"] = b""
        state["value"] = b""

    def on_part_data(data, start, end):
        state["part"]["data"] += data[start:end]

    def on_part_end():
        parts.append(state["part"])

    parser = MultipartParser(
        boundary,
        callbacks={
            "on_part_begin": on_part_begin,
            "on_header_field": on_header_field,
            "on_header_value": on_header_value,
            "on_header_end": on_header_end,
            "on_part_data": on_part_data,
            "on_part_end": on_part_end,
        },
    )
    parser.write(body)
    parser.finalize()
    return parts


@pytest.fixture
def parse_multipart():
    """Parse a body with python-multipart into [{"headers": {...}, "data": bytes}]."""
    return _parse


@pytest.fixture
def sample_file(tmp_path):
    """A small binary file on disk."""
    path = tmp_path / "f.bin"
    path.write_bytes(b"\x00\x01binary\r\ndata\xff")
    return path
