"""
HTML table parser for Google Sheets exports.

Implements ``BaseParser`` to turn the ``<tbody>`` of an export into a
``Document``: cell texts row by row, plus sparse formats and borders for
cells whose CSS class carries something worth keeping.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from base_parser import BaseParser
from models import Document, StyleRecord
from style_resolver import StyleSheetResolver

logger = logging.getLogger(__name__)


class TableStructureError(ValueError):
    """The document has no table body to convert."""


# ── helpers ───────────────────────────────────────────────────────────────


def _cell_text(cell: Tag) -> str:
    """Plain text of a cell, entities decoded, ``&nbsp;`` as a plain space."""
    return cell.get_text().replace("\xa0", " ").strip()


def _cell_class(cell: Tag) -> str:
    """The cell's ``class`` attribute as written, or ``""``."""
    classes = cell.get("class", [])
    if isinstance(classes, list):
        return " ".join(classes).strip()
    return classes.strip()


def _trim_trailing_empty_rows(rows: list[list[str]]) -> list[list[str]]:
    last = len(rows)
    while last > 0 and all(v == "" for v in rows[last - 1]):
        last -= 1
    return rows[:last]


# ── TableExtractor ────────────────────────────────────────────────────────


class TableExtractor(BaseParser):
    """Parser for Sheets "Download as HTML" exports."""

    def __init__(self) -> None:
        super().__init__()
        self._resolver = StyleSheetResolver()

    # ── BaseParser interface ──

    def _extract_styles(self, soup: BeautifulSoup) -> dict[str, StyleRecord]:
        return self._resolver.resolve(soup)

    def _extract_document(
        self, soup: BeautifulSoup, styles: dict[str, StyleRecord]
    ) -> Document:
        tbody = soup.find("tbody")
        if tbody is None:
            raise TableStructureError("No <tbody> found")

        doc = Document()

        for tr in tbody.find_all("tr", recursive=False):
            row_idx = len(doc.data)
            row_data: list[str] = []

            # Only <td> cells; the <th> row header never counts as a column
            for col_idx, td in enumerate(tr.find_all("td", recursive=False)):
                row_data.append(_cell_text(td))

                style = styles.get(_cell_class(td))
                if style is None:
                    continue

                fmt = style.to_format()
                if not fmt.is_empty():
                    doc.formats.setdefault(row_idx, {})[col_idx] = fmt

                if style.has_border:
                    doc.borders.setdefault(row_idx, {})[col_idx] = style.to_borders()

            doc.data.append(row_data)

        self._trim(doc)

        logger.info(
            "rows: %d, bordered cells: %d", len(doc.data), doc.bordered_cell_count
        )
        return doc

    # ── trimming ──

    @staticmethod
    def _trim(doc: Document) -> None:
        """Drop trailing all-empty rows together with their formats/borders."""
        doc.data = _trim_trailing_empty_rows(doc.data)
        row_count = len(doc.data)

        for sparse in (doc.formats, doc.borders):
            for row_idx in [r for r in sparse if r >= row_count]:
                del sparse[row_idx]
