"""Error hierarchy for the matchblocks library.

Every public error class inherits from MatchblocksError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

The pure matching functions never raise on well-formed text.  The only
failure classes are contract violations (hand-built offsets that fall
outside the sequence) and inputs rejected by an explicit
``max_input_length`` limit on :class:`~matchblocks.config.MatcherConfig`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the library can raise."""

    CONTRACT_VIOLATION = "CONTRACT_VIOLATION"
    INPUT_TOO_LONG = "INPUT_TOO_LONG"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class MatchblocksError(Exception):
    """Base exception for all matchblocks errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Subclasses
# ---------------------------------------------------------------------------

class MatchblocksContractError(MatchblocksError, ValueError):
    """Offsets passed to the slicer or finder violate their preconditions.

    Raised for ``low > high``, ``high > length`` or a negative ``low``.
    This is a programming error in offset bookkeeping and is never turned
    into an empty result.

    Context keys: ``low``, ``high``, ``length`` (plus ``argument`` when the
    failing window belongs to a named sequence).
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONTRACT_VIOLATION,
            message=message,
            context=context,
            cause=cause,
        )


class MatchblocksInputTooLongError(MatchblocksError):
    """An input exceeds ``MatcherConfig.max_input_length``.

    Context keys: ``argument`` (``"a"`` or ``"b"``), ``length``, ``limit``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INPUT_TOO_LONG,
            message=message,
            context=context,
            cause=cause,
        )
