"""Error kinds raised by the fetcher, the transform engine and request parsing."""

from enum import StrEnum
from typing_extensions import override


class ErrorKind(StrEnum):
    FETCH_FAILED = "fetch_failed"
    DECODE_FAILED = "decode_failed"
    SIZE_MISMATCH = "size_mismatch"
    ENCODE_FAILED = "encode_failed"
    BAD_REQUEST_SHAPE = "bad_request_shape"


class ResizerError(Exception):
    """Base class for every failure that terminates a request.

    Subclasses pin ``kind`` so the HTTP layer can pick a status code
    without parsing messages.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class FetchError(ResizerError):
    kind: ErrorKind = ErrorKind.FETCH_FAILED


class DecodeError(ResizerError):
    kind: ErrorKind = ErrorKind.DECODE_FAILED


class SizeMismatchError(ResizerError):
    kind: ErrorKind = ErrorKind.SIZE_MISMATCH


class EncodeError(ResizerError):
    kind: ErrorKind = ErrorKind.ENCODE_FAILED


class BadRequestShapeError(ResizerError):
    kind: ErrorKind = ErrorKind.BAD_REQUEST_SHAPE
