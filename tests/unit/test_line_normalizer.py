"""Unit tests for line splitting and normalization."""

import pytest

from link_analyzer.normalization import has_scheme, normalize_line, split_lines


class TestSplitLines:
    """Test suite for split_lines."""

    def test_empty_input(self):
        """Test empty input yields no lines."""
        assert split_lines("") == []

    def test_blank_lines_dropped(self):
        """Test whitespace-only lines are discarded."""
        assert split_lines("\n   \n\t\n") == []

    def test_lf_and_crlf(self):
        """Test both LF and CRLF separators are handled."""
        text = "a.com\r\nb.com\nc.com\r\n"
        assert split_lines(text) == ["a.com", "b.com", "c.com"]

    def test_lines_trimmed(self):
        """Test surrounding whitespace is removed from each line."""
        assert split_lines("  https://x.com  \n\tfoo\t") == ["https://x.com", "foo"]

    def test_order_preserved(self):
        """Test lines keep input order, duplicates included."""
        assert split_lines("b\na\nb") == ["b", "a", "b"]


class TestNormalizeLine:
    """Test suite for normalize_line."""

    def test_scheme_inference(self):
        """Test https:// is prefixed when no scheme is present."""
        assert normalize_line("example.com", True) == "https://example.com"

    def test_existing_scheme_kept(self):
        """Test lines with a scheme are left unchanged."""
        assert normalize_line("http://example.com", True) == "http://example.com"
        assert normalize_line("mailto:a@b.com", True) == "mailto:a@b.com"

    def test_no_inference_when_disabled(self):
        """Test scheme-less lines are returned trimmed when inference is off."""
        assert normalize_line("example.com", False) == "example.com"
        assert normalize_line("  example.com  ", False) == "example.com"

    @pytest.mark.parametrize("assume_https", [True, False])
    def test_protocol_relative(self, assume_https):
        """Test protocol-relative lines always become https."""
        result = normalize_line("//cdn.example.com/app.js", assume_https)
        assert result == "https://cdn.example.com/app.js"

    def test_empty_line(self):
        """Test blank lines normalize to the empty string."""
        assert normalize_line("", True) == ""
        assert normalize_line("   ", True) == ""

    def test_host_with_port_treated_as_scheme(self):
        """Test 'host:port' matches the scheme pattern and is kept as-is."""
        assert normalize_line("localhost:8080", True) == "localhost:8080"

    def test_bare_token(self):
        """Test a bare token gets the https prefix."""
        assert normalize_line("nota-url", True) == "https://nota-url"


class TestHasScheme:
    """Test suite for scheme detection."""

    @pytest.mark.parametrize(
        "value",
        ["http://x", "HTTPS://x", "git+ssh://x", "a.b-c:rest", "urn:isbn:123"],
    )
    def test_detected(self, value):
        """Test valid scheme prefixes are detected."""
        assert has_scheme(value)

    @pytest.mark.parametrize(
        "value", ["example.com", "1http://x", "/path", "www.site.com/a:b", ":x"]
    )
    def test_not_detected(self, value):
        """Test strings without a leading scheme are rejected."""
        assert not has_scheme(value)
