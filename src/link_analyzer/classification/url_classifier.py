"""
URL classification.

Parses normalized candidates with pydantic's WHATWG-compliant URL validator
and extracts the structured fields reported for each row:
- protocol, hostname, domain (www. stripped), tld
- pathname, number of query pairs, fragment presence
"""

import logging
from dataclasses import asdict, dataclass
from typing import Optional
from urllib.parse import urlsplit

from pydantic import AnyUrl, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

_WWW_PREFIX = "www."
_FALLBACK_ERROR = "Invalid URL"
_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


@dataclass(frozen=True)
class ClassifiedURL:
    """
    Outcome of classifying one normalized candidate.

    Attributes:
        is_valid: True iff the candidate parsed as an absolute URL
        error: Parser message (invalid candidates only)
        protocol: Scheme without trailing colon
        hostname: Host component (None for host-less URLs)
        domain: Hostname with a single leading 'www.' removed
        tld: Lowercase text after the last '.' of domain
        pathname: Path component ('' if empty)
        query_params: Number of query key/value pairs
        has_hash: True iff the fragment is non-empty
    """

    is_valid: bool
    error: Optional[str] = None
    protocol: Optional[str] = None
    hostname: Optional[str] = None
    domain: Optional[str] = None
    tld: Optional[str] = None
    pathname: Optional[str] = None
    query_params: int = 0
    has_hash: bool = False

    def to_fields(self) -> dict:
        """Return the fields as a dict suitable for building a LinkRow."""
        return asdict(self)


def hostname_to_domain(hostname: str) -> str:
    """
    Strip a single leading 'www.' (case-insensitive) from a hostname.

    Falls back to the hostname itself if nothing would remain.

    Example:
        >>> hostname_to_domain("www.Example.com")
        'Example.com'
    """
    if hostname[: len(_WWW_PREFIX)].lower() == _WWW_PREFIX:
        stripped = hostname[len(_WWW_PREFIX) :]
        return stripped or hostname
    return hostname


def domain_to_tld(domain: str) -> Optional[str]:
    """
    Extract the lowercase last non-empty label of a dotted domain.

    Returns None when the domain has no dot. A trailing root dot is ignored,
    so "example.com." yields "com".
    """
    if "." not in domain:
        return None
    labels = [label for label in domain.split(".") if label]
    return labels[-1].lower() if labels else None


def _raw_host(url: str) -> Optional[str]:
    """
    Host exactly as written in the authority component, or None.

    Special schemes accept any run of slashes or backslashes before the
    authority, so "https:\\\\Example.com" and "https:Example.com" are read as
    "https://Example.com" before splitting.
    """
    scheme, colon, rest = url.partition(":")
    if colon and scheme.lower() in _SPECIAL_SCHEMES:
        remainder = rest.replace("\\", "/").lstrip("/")
        url = f"{scheme}://{remainder}"

    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return None

    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        return host[: end + 1] if end != -1 else None
    return host.partition(":")[0] or None


class URLClassifier:
    """
    Strict absolute-URL classifier.

    Usage:
        classifier = URLClassifier()
        result = classifier.classify("https://www.Example.com/x?a=1#top")
        print(result.domain)        # Example.com
        print(result.query_params)  # 1
    """

    def __init__(self):
        """Initialize classifier with a reusable URL validator."""
        self._adapter = TypeAdapter(AnyUrl)

    def classify(self, normalized: str) -> ClassifiedURL:
        """
        Classify a normalized candidate URL.

        Never raises: parse failures are reported through ``error``.

        Args:
            normalized: Output of the line normalizer

        Returns:
            ClassifiedURL with either the parsed fields or an error
        """
        try:
            url = self._adapter.validate_python(normalized)
        except ValidationError as e:
            return ClassifiedURL(is_valid=False, error=self._error_message(e))

        hostname = self._hostname(normalized, url.host)
        domain = hostname_to_domain(hostname) if hostname else None

        return ClassifiedURL(
            is_valid=True,
            protocol=url.scheme,
            hostname=hostname,
            domain=domain,
            tld=domain_to_tld(domain) if domain else None,
            pathname=url.path or "",
            query_params=len(url.query_params()),
            has_hash=bool(url.fragment),
        )

    def _hostname(self, normalized: str, parsed_host: Optional[str]) -> Optional[str]:
        """
        Pick the reported hostname.

        The parser lowercases hosts; the host as written is kept when it only
        differs by case, so www stripping preserves the input's casing.
        """
        if not parsed_host:
            return None

        raw_host = _raw_host(normalized)
        if raw_host and raw_host.lower() == parsed_host.lower():
            return raw_host
        return parsed_host

    @staticmethod
    def _error_message(exc: ValidationError) -> str:
        errors = exc.errors()
        if errors and errors[0].get("msg"):
            return errors[0]["msg"]
        logger.debug(f"URL validation failed without a message: {exc}")
        return _FALLBACK_ERROR
