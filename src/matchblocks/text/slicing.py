"""Code-point safe slicing.

Every offset used by matchblocks is a *Unicode scalar value* offset, never
a byte offset and never a grapheme-cluster offset.  ``"y\\u0306es"`` (which
renders as ``y̆es``) is five UTF-8 bytes, four scalar values and three
grapheme clusters; slicing it at ``[1, 4)`` yields the combining breve
followed by ``"es"``.

Python ``str`` indexing is already code-point based, so
:func:`slice_scalars` only has to enforce the offset contract.  Encoded
UTF-8 buffers go through :class:`ScalarOffsets`, which maps scalar offsets
to byte offsets by walking lead bytes once per buffer.  This module is the
only place in the package that deals with byte offsets.
"""

from __future__ import annotations

from bisect import bisect_left

from matchblocks.errors import MatchblocksContractError


def check_range(
    low: int,
    high: int,
    length: int,
    argument: str | None = None,
) -> None:
    """Raise :class:`MatchblocksContractError` unless ``0 <= low <= high <= length``.

    Parameters
    ----------
    low, high:
        Half-open range of scalar offsets.
    length:
        Scalar length of the sequence the range points into.
    argument:
        Optional name of the sequence, recorded in the error context.
    """
    if 0 <= low <= high <= length:
        return
    context: dict[str, object] = {"low": low, "high": high, "length": length}
    if argument is not None:
        context["argument"] = argument
    if low > high:
        reason = f"low ({low}) is greater than high ({high})"
    elif low < 0:
        reason = f"low ({low}) is negative"
    else:
        reason = f"high ({high}) is past the end of a sequence of length {length}"
    raise MatchblocksContractError(
        message=f"Invalid scalar range: {reason}",
        context=context,
    )


def slice_scalars(text: str, low: int, high: int) -> str:
    """Return the code points of *text* in ``[low, high)``.

    Parameters
    ----------
    text:
        The sequence to slice.
    low, high:
        Scalar offsets with ``0 <= low <= high <= len(text)``.

    Returns
    -------
    str
        The substring.  ``low == high`` returns ``""`` without touching
        *text*.

    Raises
    ------
    MatchblocksContractError
        If the offsets violate the precondition.  Out-of-range offsets are
        a bookkeeping bug and are never clamped the way ``text[low:high]``
        would clamp them.

    Examples
    --------
    >>> slice_scalars("\\u03f5thi\\u03d5\\u015b \\u03b1\\u03b2 a test", 2, 6)
    'hiϕś'
    >>> slice_scalars("abcd", 2, 2)
    ''
    """
    check_range(low, high, len(text))
    if low == high:
        return ""
    return text[low:high]


class ScalarOffsets:
    """Scalar-offset to byte-offset table for a UTF-8 encoded buffer.

    The table holds the byte offset at which every scalar value starts,
    followed by ``len(buffer)`` for the end-of-sequence offset (no encoded
    unit starts there).

    Parameters
    ----------
    buffer:
        Well-formed UTF-8 bytes.

    Raises
    ------
    MatchblocksContractError
        If *buffer* is not valid UTF-8.
    """

    __slots__ = ("_buffer", "_starts")

    def __init__(self, buffer: bytes) -> None:
        try:
            buffer.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MatchblocksContractError(
                message=f"Buffer is not valid UTF-8: {exc.reason}",
                context={"byte_offset": exc.start, "length": len(buffer)},
                cause=exc,
            ) from exc
        self._buffer = buffer
        # Continuation bytes look like 0b10xxxxxx; every other byte starts a
        # scalar value.
        self._starts: list[int] = [
            offset for offset, byte in enumerate(buffer) if byte & 0xC0 != 0x80
        ]
        self._starts.append(len(buffer))

    def __len__(self) -> int:
        """Number of scalar values in the buffer."""
        return len(self._starts) - 1

    def to_byte(self, scalar_offset: int) -> int:
        """Byte offset at which scalar *scalar_offset* starts.

        ``scalar_offset == len(self)`` maps to ``len(buffer)``.
        """
        check_range(scalar_offset, scalar_offset, len(self))
        return self._starts[scalar_offset]

    def to_scalar(self, byte_offset: int) -> int:
        """Scalar offset of the value starting at *byte_offset*.

        Raises :class:`MatchblocksContractError` when *byte_offset* falls
        inside a multi-byte sequence or outside the buffer.
        """
        index = bisect_left(self._starts, byte_offset)
        if index == len(self._starts) or self._starts[index] != byte_offset:
            raise MatchblocksContractError(
                message=f"Byte offset {byte_offset} is not on a scalar boundary",
                context={"byte_offset": byte_offset, "length": len(self._buffer)},
            )
        return index

    def slice(self, low: int, high: int) -> bytes:
        """Encoded bytes of the scalar values in ``[low, high)``."""
        check_range(low, high, len(self))
        if low == high:
            return b""
        return self._buffer[self._starts[low] : self._starts[high]]


def slice_utf8(buffer: bytes, low: int, high: int) -> bytes:
    """Slice a UTF-8 buffer by scalar offsets without splitting a code point.

    Convenience wrapper that builds a one-off :class:`ScalarOffsets`.  Build
    the table yourself when slicing the same buffer repeatedly.

    Examples
    --------
    >>> slice_utf8("na\\u00efve".encode(), 2, 5)
    b'\\xc3\\xafve'
    """
    return ScalarOffsets(buffer).slice(low, high)
