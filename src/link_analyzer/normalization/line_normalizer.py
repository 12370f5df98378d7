"""
Line splitting and normalization.

Turns a pasted block of text into candidate absolute URL strings:
- Split on LF / CRLF, trim, drop blank lines
- Rewrite protocol-relative lines (//host/...) to https
- Optionally infer https:// for lines without a URI scheme
"""

import re

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." ) ":"
SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """
    Split raw input into trimmed, non-empty lines.

    Args:
        text: Arbitrary text, lines separated by '\\n' or '\\r\\n'

    Returns:
        Lines in input order, whitespace-trimmed, blanks removed
    """
    if not text:
        return []

    lines = (line.strip() for line in _LINE_BREAK.split(text))
    return [line for line in lines if line]


def has_scheme(value: str) -> bool:
    """Return True if the string starts with a URI scheme."""
    return SCHEME_PATTERN.match(value) is not None


def normalize_line(raw: str, assume_https: bool) -> str:
    """
    Rewrite a raw line into a candidate absolute URL.

    Normalization never fails; the result may still be an invalid URL.

    Args:
        raw: One line of input
        assume_https: Prefix https:// when the line carries no scheme

    Returns:
        Normalized candidate URL ('' for blank input)

    Example:
        >>> normalize_line("example.com", True)
        'https://example.com'
        >>> normalize_line("//cdn.example.com/app.js", False)
        'https://cdn.example.com/app.js'
    """
    trimmed = raw.strip()
    if not trimmed:
        return ""

    # Protocol-relative references always resolve against https
    if trimmed.startswith("//"):
        return f"https:{trimmed}"

    if not assume_https or has_scheme(trimmed):
        return trimmed

    return f"https://{trimmed}"
