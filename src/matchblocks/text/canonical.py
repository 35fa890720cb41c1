"""Canonical forms for text before it is matched.

:func:`full_process` runs four steps, in this order:

1. if ``force_ascii``, drop every non-ASCII code point;
2. replace every non-alphanumeric code point with a single space;
3. lower-case;
4. strip leading and trailing whitespace.

The ASCII filter runs *before* the substitution, so a dropped character
leaves no space behind: ``full_process("a¬4ሴ2€耀", True)`` is ``"a42"``,
whereas without the filter the result is ``"a 4ሴ2 耀"``.  Interior runs of
spaces are not collapsed.
"""

from __future__ import annotations

import regex


def full_process(text: str, force_ascii: bool = False) -> str:
    """Return the canonical form of *text*.

    A code point is alphanumeric when it has the Unicode Alphabetic
    property or belongs to a Number category, so combining letters such as
    the Devanagari vowel sign in ``"\u0915\u093e"`` are kept.  Lower-casing
    uses :meth:`str.lower`.

    Parameters
    ----------
    text:
        Raw input.
    force_ascii:
        Remove non-ASCII code points before anything else.

    Returns
    -------
    str
        The processed text.  Applying :func:`full_process` again with the
        same *force_ascii* returns it unchanged.

    Examples
    --------
    >>> full_process("C'est la vie")
    'c est la vie'
    >>> full_process("Ça va?")
    'ça va'
    >>> full_process("Ça va?", force_ascii=True)
    'a va'
    """
    if force_ascii:
        text = "".join(ch for ch in text if ch.isascii())
    text = _replace_non_alnum(text).lower()
    # Some case mappings emit marks that are not Alphabetic ("İ" -> "i" +
    # U+0307).  Replacing them again keeps the result idempotent, at the cost
    # of "İx" giving "i x" rather than "i̇x".
    return _replace_non_alnum(text).strip()


# Unicode Alphabetic property (letters plus combining letters such as Indic
# vowel signs) or any Number category.
_NON_ALNUM_RE = regex.compile(r"[^\p{Alphabetic}\p{N}]")


def _replace_non_alnum(text: str) -> str:
    return _NON_ALNUM_RE.sub(" ", text)


normalize = full_process


def is_valid(text: str) -> bool:
    """Return ``False`` for the empty string and ``True`` for anything else.

    Kept so callers porting from other fuzzy-matching libraries find the
    same validation hook.
    """
    return bool(text)


validate_string = is_valid
