"""
Abstract base parser for the ``.wsheet`` document format.

Concrete subclasses implement style resolution and table extraction for a
specific export flavour; reading the source and building the soup once per
document is shared here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup

from models import Document, StyleRecord


class BaseParser(ABC):
    """Base class for all sheet parsers."""

    # ── public entry points ──

    def parse(self, file_path: str | Path) -> dict[str, Any]:
        """Parse *file_path* and return the JSON-ready document.

        Returns
        -------
        dict with keys ``version``, ``data``, ``formats``, ``borders``.
        """
        html = Path(file_path).read_text(encoding="utf-8")
        return self.parse_text(html).to_dict()

    def parse_text(self, html: str) -> Document:
        """Convert raw export text into a ``Document``."""
        soup = BeautifulSoup(html, "lxml")
        styles = self._extract_styles(soup)
        return self._extract_document(soup, styles)

    # ── abstract methods ── (to be implemented by subclasses)

    @abstractmethod
    def _extract_styles(self, soup: BeautifulSoup) -> dict[str, StyleRecord]:
        """Build the class → style map from the embedded style sheets."""
        ...

    @abstractmethod
    def _extract_document(
        self, soup: BeautifulSoup, styles: dict[str, StyleRecord]
    ) -> Document:
        """Walk the table body and assemble the document."""
        ...
