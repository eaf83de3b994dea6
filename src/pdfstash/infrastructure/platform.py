"""Platform boundary — rendering and presenting documents.

The store never renders or displays anything itself. Rendering images to
a PDF and handing a stored PDF to the OS (viewer, share sheet) are
supplied by the host through the two protocols below.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Literal, Protocol

import click

from pdfstash.domain.pages import build_page_html

logger = logging.getLogger(__name__)

ImageSource = str | Path
PresentAction = Literal["open", "share"]


class Renderer(Protocol):
    """Produces a PDF file from image sources and returns its path."""

    def render(self, images: Sequence[ImageSource]) -> Path: ...


class Presenter(Protocol):
    """Hands a stored PDF to the OS for viewing or sharing."""

    def present(self, path: Path, display_name: str, *, action: PresentAction = "open") -> None: ...


class HtmlPageRenderer:
    """Renderer that prints a one-image-per-page HTML document.

    *print_to_file* is the platform's HTML-to-PDF facility: it receives
    the markup and returns the path of the PDF it wrote.
    """

    def __init__(self, print_to_file: Callable[[str], Path]) -> None:
        self._print_to_file = print_to_file

    def render(self, images: Sequence[ImageSource]) -> Path:
        logger.debug("Rendering PDF with %d images", len(images))
        html = build_page_html(images)
        return Path(self._print_to_file(html))


class LaunchPresenter:
    """Presenter backed by :func:`click.launch`.

    ``open`` starts the default PDF viewer; ``share`` reveals the file in
    the system file manager so it can be dragged or sent elsewhere.
    """

    def present(self, path: Path, display_name: str, *, action: PresentAction = "open") -> None:
        logger.debug("Presenting %s (%s) via %s", display_name, path, action)
        code = click.launch(str(path), locate=action == "share")
        if code != 0:
            msg = f"Launcher exited with status {code} for {display_name}"
            raise OSError(msg)
