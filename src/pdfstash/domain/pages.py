"""HTML page markup for image-to-PDF rendering.

The renderer prints one image per page. Images are embedded as
``data:`` URIs so the printed document has no external references.
"""

from __future__ import annotations

import base64
from collections.abc import Sequence
from pathlib import Path

_MIME_BY_SUFFIX: dict[str, str] = {
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}
_DEFAULT_MIME = "image/jpeg"

_PAGE_STYLE = """\
      body { margin: 0; padding: 20px; }
      img {
        max-width: 100%;
        height: auto;
        display: block;
        margin: 0 auto 20px auto;
        page-break-after: always;
      }
      img:last-child { page-break-after: auto; }"""


def mime_type_for(source: str) -> str:
    """Guess the image MIME type from a path or URI suffix (jpeg by default)."""
    return _MIME_BY_SUFFIX.get(Path(source.lower()).suffix, _DEFAULT_MIME)


def to_data_uri(source: str | Path) -> str:
    """Return *source* as a ``data:`` URI, reading the file if needed.

    Strings that already are ``data:image/`` URIs pass through unchanged.
    """
    text = str(source)
    if text.startswith("data:image/"):
        return text
    encoded = base64.b64encode(Path(text).read_bytes()).decode("ascii")
    return f"data:{mime_type_for(text)};base64,{encoded}"


def build_page_html(sources: Sequence[str | Path]) -> str:
    """Build the printable HTML document, one ``<img>`` per source."""
    images = "".join(f'<img src="{to_data_uri(src)}" />' for src in sources)
    return (
        "<html>\n"
        "  <head>\n"
        '    <meta charset="UTF-8">\n'
        f"    <style>\n{_PAGE_STYLE}\n    </style>\n"
        "  </head>\n"
        f"  <body>\n    {images}\n  </body>\n"
        "</html>\n"
    )
