"""Text utilities.

Casing transforms, blank checks, pattern-based validation and extraction, and
simple string measurements.

Case conversion splits the input into words on separators (whitespace, ``_``,
``-``, ``.``) and on lower-to-upper transitions. Runs of capitals are kept
together as one acronym word, so ``"parseHTTPResponse"`` splits into
``parse``, ``HTTP`` and ``Response``. Only ASCII letters and digits form words.

Note:
    ``is_valid_email`` and ``is_valid_url`` match fixed regular expressions.
    They are best-effort filters, not RFC 5322 / RFC 3986 validators.
"""

import re
import typing as tp

from primkit.core.config import settings
from primkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "capitalize",
    "capitalize_words",
    "to_title_case",
    "reverse",
    "is_blank",
    "is_empty",
    "split_words",
    "to_camel_case",
    "to_snake_case",
    "to_pascal_case",
    "to_kebab_case",
    "extract_numbers",
    "is_valid_email",
    "is_valid_url",
    "truncate",
    "is_numeric",
    "count_occurrences",
    "remove_whitespace",
]

_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")
_NUMBER_PATTERN = re.compile(r"(?<![0-9.])-?[0-9]+(?:\.[0-9]+)?")
_DIGITS_PATTERN = re.compile(r"[0-9]+")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$"
)
_URL_PATTERN = re.compile(
    r"^(?:https?|ftp)://"
    r"(?:[A-Za-z0-9-]+\.)*[A-Za-z0-9-]+"  # host
    r"(?::[0-9]{1,5})?"  # port
    r"(?:[/?#]\S*)?$",
    re.IGNORECASE,
)


# =============================================================================
# Capitalization
# =============================================================================


def capitalize(text: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def capitalize_words(text: str) -> str:
    """Capitalize the first character of every space-separated word."""
    if not text:
        return text
    return " ".join(capitalize(word) for word in text.split(" "))


def to_title_case(text: str) -> str:
    """Capitalize every space-separated word and lowercase the remainder.

    Example:
        >>> to_title_case("the QUICK brown fox")
        'The Quick Brown Fox'
    """
    return " ".join(capitalize(word.lower()) for word in text.split(" "))


def reverse(text: str) -> str:
    return text[::-1]


# =============================================================================
# Checks
# =============================================================================


def is_blank(text: tp.Optional[str]) -> bool:
    """``True`` for ``None``, the empty string or whitespace only."""
    return text is None or text.strip() == ""


def is_empty(text: tp.Optional[str]) -> bool:
    """``True`` for ``None`` or the empty string."""
    return text is None or text == ""


def is_numeric(text: str) -> bool:
    """``True`` if ``text`` is non-empty and holds only the digits 0-9."""
    return _DIGITS_PATTERN.fullmatch(text) is not None


def is_valid_email(text: str) -> bool:
    return _EMAIL_PATTERN.match(text) is not None


def is_valid_url(text: str) -> bool:
    """Accept ``http``, ``https`` and ``ftp`` URLs with an optional port and path."""
    return _URL_PATTERN.match(text) is not None


# =============================================================================
# Case conversion
# =============================================================================


def split_words(text: str) -> tp.List[str]:
    """Split ``text`` into words for case conversion.

    Example:
        >>> split_words("parseHTTPResponse_v2")
        ['parse', 'HTTP', 'Response', 'v', '2']
    """
    return _WORD_PATTERN.findall(text)


def to_camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def to_pascal_case(text: str) -> str:
    return "".join(word.capitalize() for word in split_words(text))


def to_snake_case(text: str) -> str:
    return "_".join(word.lower() for word in split_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(word.lower() for word in split_words(text))


# =============================================================================
# Extraction and measurement
# =============================================================================


def extract_numbers(text: str) -> tp.List[tp.Union[int, float]]:
    """Numbers embedded in ``text``, in order of appearance.

    A leading ``-`` is read as a sign. Values with a decimal part are returned
    as ``float``, all others as ``int``.

    Example:
        >>> extract_numbers("3 apples cost -1.50 each, 12 total")
        [3, -1.5, 12]
    """
    numbers: tp.List[tp.Union[int, float]] = []
    for match in _NUMBER_PATTERN.findall(text):
        numbers.append(float(match) if "." in match else int(match))
    return numbers


def count_occurrences(text: str, substring: str) -> int:
    """Number of non-overlapping occurrences of ``substring``.

    An empty ``substring`` occurs zero times.
    """
    if not substring:
        return 0
    return text.count(substring)


def remove_whitespace(text: str) -> str:
    """Drop every whitespace character, including inner ones."""
    return _WHITESPACE_PATTERN.sub("", text)


def truncate(text: str, length: int, suffix: tp.Optional[str] = None) -> str:
    """Shorten ``text`` to at most ``length`` characters, ending with ``suffix``.

    The suffix counts toward ``length``, so the result is never longer than
    ``length``. Text that already fits is returned unchanged.

    Args:
        text: Text to shorten.
        length: Maximum length of the result. Must be greater than zero.
        suffix: Marker appended to shortened text. Defaults to
            ``Settings.TRUNCATE_SUFFIX`` (``"..."``).

    Returns:
        The original text or a shortened copy ending with ``suffix``.

    Raises:
        ValueError: If ``length <= 0``, or if ``text`` must be shortened and
            the suffix alone is at least ``length`` characters long.

    Example:
        >>> truncate("hello world", 5)
        'he...'
    """
    if length <= 0:
        raise ValueError(f"length must be greater than 0, got {length}")
    suffix = settings.TRUNCATE_SUFFIX if suffix is None else suffix

    if len(text) <= length:
        return text
    if len(suffix) >= length:
        logger.debug(f"truncate suffix {suffix!r} does not fit in length {length}")
        raise ValueError(
            f"suffix of {len(suffix)} characters leaves no room in length {length}"
        )
    return text[: length - len(suffix)] + suffix
