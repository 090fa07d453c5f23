"""Tests for the InputFile upload descriptor."""

import io
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botsdk.exceptions import ValidationError
from botsdk.multipart import InputFile


class TestConstruction:

    def test_path_source(self, tmp_path) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"data")
        upload = InputFile("a.bin", str(path))
        assert upload.name == "a.bin"
        assert upload.owns_stream is True

    def test_stream_source(self) -> None:
        upload = InputFile("a.bin", io.BytesIO(b"data"))
        assert upload.owns_stream is False

    def test_missing_name(self) -> None:
        with pytest.raises(ValidationError):
            InputFile(None, io.BytesIO(b""))

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ValidationError):
            InputFile("nope.jpg", tmp_path / "nope.jpg")

    def test_directory_is_rejected(self, tmp_path) -> None:
        with pytest.raises(ValidationError):
            InputFile("dir", tmp_path)

    @pytest.mark.parametrize("source", [None, 42, b"raw bytes"])
    def test_unsupported_source(self, source) -> None:
        with pytest.raises(ValidationError):
            InputFile("x", source)


class TestOpen:

    def test_path_opened_binary(self, tmp_path) -> None:
        path = tmp_path / "a.txt"
        path.write_text("hello")
        stream = InputFile("a.txt", path).open()
        try:
            assert stream.read() == b"hello"
        finally:
            stream.close()

    def test_stream_returned_as_is(self) -> None:
        source = io.BytesIO(b"data")
        assert InputFile("a", source).open() is source

    def test_binary_part(self) -> None:
        source = io.BytesIO(b"data")
        assert InputFile("a.bin", source).to_part(source) == ("a.bin", source, "application/octet-stream")

    def test_text_part(self) -> None:
        source = io.StringIO("text")
        assert InputFile("a.txt", source).to_part(source) == ("a.txt", b"text", "text/plain; charset=utf-8")

    def test_repr_hides_source(self) -> None:
        assert repr(InputFile("a", io.BytesIO())) == "InputFile(name='a', source=stream)"
