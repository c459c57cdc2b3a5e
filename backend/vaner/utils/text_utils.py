"""Text helpers for user-supplied strings rendered into HTML and SVG."""
import html
import re
from typing import Mapping
from urllib.parse import quote

_CONTROL_WS = re.compile(r"[\r\n\t]+")
_ANY_WS = re.compile(r"\s+")


def clamp_text(text: str, max_len: int) -> str:
    """Normalize to a single trimmed line and cut to max_len with an ellipsis."""
    normalized = _ANY_WS.sub(" ", _CONTROL_WS.sub(" ", text)).strip()
    if len(normalized) <= max_len:
        return normalized
    return normalized[:max(0, max_len - 1)].rstrip() + "…"


def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' for HTML text and attribute values."""
    return html.escape(text, quote=True).replace("&#x27;", "&#39;")


def encode_uri_component(text: str) -> str:
    """Percent-encode a query value the way browsers' encodeURIComponent does."""
    return quote(text, safe="!'()*-._~")


def get_origin(headers: Mapping[str, str]) -> str:
    """Public origin of a request, honoring proxy forwarding headers.
    
    Only the first value of a comma-separated forwarded header is used.
    """
    proto = (headers.get("x-forwarded-proto") or "https").split(",")[0].strip()
    host = (headers.get("x-forwarded-host") or headers.get("host") or "").split(",")[0].strip()
    return f"{proto}://{host}"
