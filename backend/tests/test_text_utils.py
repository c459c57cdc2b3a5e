"""Tests for text helpers."""
import unittest

from vaner.utils.text_utils import clamp_text, encode_uri_component, escape_html, get_origin


class TestClampText(unittest.TestCase):
    """Tests for clamp_text."""
    
    def test_collapses_whitespace(self) -> None:
        """Newlines, tabs and runs of spaces become single spaces."""
        self.assertEqual(clamp_text("  Gå\r\n en \t tur  ", 60), "Gå en tur")
    
    def test_short_text_unchanged(self) -> None:
        """Text within the limit is returned as-is."""
        self.assertEqual(clamp_text("Les", 3), "Les")
    
    def test_long_text_gets_ellipsis(self) -> None:
        """Over-long text is cut to max_len including the ellipsis."""
        result = clamp_text("abcdefghij", 5)
        self.assertEqual(result, "abcd…")
        self.assertEqual(len(result), 5)
    
    def test_length_counts_characters_not_utf16_units(self) -> None:
        """Emoji count as one character each and are never split."""
        self.assertEqual(clamp_text("✨" * 3, 3), "✨✨✨")
        self.assertEqual(clamp_text("😀" * 4, 3), "😀😀…")
    
    def test_trailing_space_removed_before_ellipsis(self) -> None:
        """Whitespace at the cut point is trimmed."""
        self.assertEqual(clamp_text("abc defgh", 5), "abc…")


class TestEscapeHtml(unittest.TestCase):
    """Tests for escape_html."""
    
    def test_escapes_special_characters(self) -> None:
        """&, <, >, double and single quotes are escaped."""
        self.assertEqual(
            escape_html("<a href=\"x\">Tom's & co</a>"),
            "&lt;a href=&quot;x&quot;&gt;Tom&#39;s &amp; co&lt;/a&gt;",
        )


class TestEncodeUriComponent(unittest.TestCase):
    """Tests for encode_uri_component."""
    
    def test_encodes_like_browsers(self) -> None:
        """Spaces, ampersands and non-ASCII are percent-encoded."""
        self.assertEqual(encode_uri_component("Gå & løp!"), "G%C3%A5%20%26%20l%C3%B8p!")


class TestGetOrigin(unittest.TestCase):
    """Tests for get_origin."""
    
    def test_forwarded_headers_win(self) -> None:
        """First value of each forwarded header is used."""
        headers = {
            "x-forwarded-proto": "http, https",
            "x-forwarded-host": "vaner.app, proxy.internal",
            "host": "backend:8000",
        }
        self.assertEqual(get_origin(headers), "http://vaner.app")
    
    def test_falls_back_to_host_and_https(self) -> None:
        """Without forwarding headers the Host header and https are used."""
        self.assertEqual(get_origin({"host": "vaner.app"}), "https://vaner.app")


if __name__ == "__main__":
    unittest.main()
