"""Upload descriptors for ``multipart/form-data`` calls.

An :class:`InputFile` pairs the file name shown by Telegram with its data
source.  The source is either a path, which the client opens and closes
itself, or a stream the caller already opened, which the client reads but
never closes.
"""

from __future__ import annotations

import io
import os
from typing import IO, Any, Tuple, Union

from botsdk.exceptions import ValidationError

Source = Union[str, "os.PathLike[str]", IO[Any]]


class InputFile:
    """A named file upload.

    Args:
        name: File name sent with the part, e.g. ``"photo.jpg"``.
        source: Path to an existing file, or a readable open stream.

    Raises:
        ValidationError: If *name* is ``None`` or *source* is neither an
            existing file path nor a readable stream.
    """

    __slots__ = ("_name", "_source")

    def __init__(self, name: str, source: Source) -> None:
        if name is None:
            raise ValidationError("InputFile requires a file name")
        if isinstance(source, (str, os.PathLike)):
            if not os.path.isfile(source):
                raise ValidationError(f"InputFile source is not a file: {os.fspath(source)!r}")
        elif not callable(getattr(source, "read", None)):
            raise ValidationError(f"InputFile source must be a path or a readable stream, got {type(source).__name__}")
        self._name = str(name)
        self._source = source

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> Source:
        return self._source

    @property
    def owns_stream(self) -> bool:
        """``True`` when the client opens (and therefore closes) the stream."""
        return isinstance(self._source, (str, os.PathLike))

    def open(self) -> IO[Any]:
        """Return a readable stream for this upload.

        Path sources are opened in binary mode; the caller of this method
        is responsible for closing the result when :attr:`owns_stream` is
        ``True``.  Stream sources are returned as they are.
        """
        if self.owns_stream:
            return open(self._source, "rb")  # type: ignore[arg-type]
        return self._source  # type: ignore[return-value]

    def to_part(self, stream: IO[Any]) -> Tuple[str, Any, str]:
        """Build the ``requests`` file tuple for *stream*.

        Text-mode streams become a UTF-8 text part; anything else is sent
        as a binary part.
        """
        if isinstance(stream, io.TextIOBase):
            return (self._name, stream.read().encode("utf-8"), "text/plain; charset=utf-8")
        return (self._name, stream, "application/octet-stream")

    def __repr__(self) -> str:
        kind = "path" if self.owns_stream else "stream"
        return f"InputFile(name={self._name!r}, source={kind})"
