"""Line normalization — turn a raw input line into a candidate domain."""

from __future__ import annotations

_SCHEME_PREFIXES = ("http://", "https://")
_SKIP_LINES = frozenset({"", "."})


def normalize_line(raw: str) -> str | None:
    """Normalize one input line, or return None if it should be skipped.

    Steps run in a fixed order and never raise:

    1. trim surrounding whitespace (skip if empty or ``"."``)
    2. drop a leading ``http://``, then a leading ``https://``
    3. collapse ``..`` to ``.`` in one pass
    4. drop one trailing ``.``
    5. truncate at the first ``:`` (port and anything after it)

    The dot collapse is a single pass, so three consecutive dots come
    out as two.

    Examples:
        >>> normalize_line("  https://www.example.com:8443  ")
        'www.example.com'
        >>> normalize_line("a...b.com")
        'a..b.com'
        >>> normalize_line(".") is None
        True
    """
    domain = raw.strip()
    if domain in _SKIP_LINES:
        return None

    for prefix in _SCHEME_PREFIXES:
        domain = domain.removeprefix(prefix)
    domain = domain.replace("..", ".")
    domain = domain.removesuffix(".")
    return domain.split(":", 1)[0]
