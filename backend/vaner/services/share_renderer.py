"""Share page rendering - HTML landing page and SVG preview image.

The page carries Open Graph and Twitter card tags so chat apps and social
networks show a rich preview. The preview image is a plain SVG generated from
the habit name. All user text goes through escape_html before rendering.
"""
from typing import Mapping, Optional

from ..schemas.share import ShareContent
from ..utils.text_utils import clamp_text, encode_uri_component, escape_html, get_origin

APP_NAME = "Vaner"

# Page defaults
PAGE_NAME_MAX_LEN = 60
PAGE_DEFAULT_NAME = "En vane"

# Image defaults
IMAGE_NAME_MAX_LEN = 40
IMAGE_DEFAULT_NAME = "Vaner"
IMAGE_WIDTH = 1200
IMAGE_HEIGHT = 630

FONT_STACK = "system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif"


def build_share_content(
    raw_name: Optional[str],
    headers: Mapping[str, str],
    path: str,
    query: str = "",
) -> ShareContent:
    """Derive page title, description and URLs from the request."""
    name = clamp_text(raw_name or PAGE_DEFAULT_NAME, PAGE_NAME_MAX_LEN)
    origin = get_origin(headers)
    url = f"{origin}{path}" + (f"?{query}" if query else "")
    
    return ShareContent(
        name=name,
        title=f"{name} – {APP_NAME}",
        description=f"Jeg bygger vanen “{name}” i {APP_NAME}.",
        origin=origin,
        url=url,
        image_url=f"{origin}/og.svg?name={encode_uri_component(name)}",
    )


def render_share_page(content: ShareContent) -> str:
    """Render the landing page HTML."""
    title = escape_html(content.title)
    description = escape_html(content.description)
    image_url = escape_html(content.image_url)
    
    return f"""<!doctype html>
<html lang="no">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{title}</title>
    <meta name="description" content="{description}" />

    <meta property="og:type" content="website" />
    <meta property="og:title" content="{title}" />
    <meta property="og:description" content="{description}" />
    <meta property="og:url" content="{escape_html(content.url)}" />
    <meta property="og:image" content="{image_url}" />
    <meta property="og:image:type" content="image/svg+xml" />
    <meta property="og:image:width" content="{IMAGE_WIDTH}" />
    <meta property="og:image:height" content="{IMAGE_HEIGHT}" />

    <meta name="twitter:card" content="summary_large_image" />
    <meta name="twitter:title" content="{title}" />
    <meta name="twitter:description" content="{description}" />
    <meta name="twitter:image" content="{image_url}" />
  </head>
  <body style="font-family: {FONT_STACK}; margin: 40px; color: #0f172a;">
    <h1 style="margin: 0 0 8px;">{escape_html(content.name)}</h1>
    <p style="margin: 0 0 20px; color: #334155;">
      Åpne {APP_NAME} for å se mer – eller last ned appen.
    </p>
    <p style="margin: 0;">
      <a href="{escape_html(content.origin)}" style="display: inline-block; padding: 10px 14px; border-radius: 10px; background: #0f766e; color: white; text-decoration: none;">Gå til {APP_NAME}</a>
    </p>
  </body>
</html>"""


def render_og_image(raw_name: Optional[str]) -> str:
    """Render the 1200x630 SVG preview for a habit name."""
    name = escape_html(clamp_text(raw_name or IMAGE_DEFAULT_NAME, IMAGE_NAME_MAX_LEN))
    
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="{IMAGE_WIDTH}" height="{IMAGE_HEIGHT}" viewBox="0 0 {IMAGE_WIDTH} {IMAGE_HEIGHT}">
  <defs>
    <linearGradient id="bg" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0%" stop-color="#0f766e"/>
      <stop offset="100%" stop-color="#0b3b3a"/>
    </linearGradient>
    <filter id="shadow" x="-20%" y="-20%" width="140%" height="140%">
      <feDropShadow dx="0" dy="12" stdDeviation="18" flood-color="#000000" flood-opacity="0.28"/>
    </filter>
  </defs>
  <rect width="{IMAGE_WIDTH}" height="{IMAGE_HEIGHT}" fill="url(#bg)"/>
  <rect x="70" y="80" width="1060" height="470" rx="28" fill="#0b1220" fill-opacity="0.25" filter="url(#shadow)"/>
  <text x="120" y="180" font-size="44" font-family="{FONT_STACK}" fill="#cbd5e1">{APP_NAME}</text>
  <text x="120" y="290" font-size="72" font-weight="700" font-family="{FONT_STACK}" fill="#ffffff">{name}</text>
  <text x="120" y="360" font-size="30" font-family="{FONT_STACK}" fill="#e2e8f0">Små vaner. Stor effekt.</text>
  <text x="120" y="470" font-size="26" font-family="{FONT_STACK}" fill="#a7f3d0">Åpne lenken for å få appen</text>
</svg>"""
