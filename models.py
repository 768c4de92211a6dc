"""
Data models for the ``.wsheet`` document format.

Contains the resolved ``StyleRecord`` of a CSS class, the sparse per-cell
``CellFormat`` / ``CellBorders`` entries and the ``Document`` itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from config import (
    DEFAULT_BG_COLOR,
    DEFAULT_TEXT_COLOR,
    DOCUMENT_VERSION,
    TextAlign,
)


# ── StyleRecord ───────────────────────────────────────────────────────────


@dataclass
class StyleRecord:
    """Recognized properties of one ``.waffle .<class>`` rule.

    ``None`` means the rule did not specify the property.  Border flags turn
    into explicit booleans as soon as the rule mentions that side.
    """

    bold: bool | None = None
    italic: bool | None = None
    color: str | None = None
    bg_color: str | None = None
    font_size: int | None = None
    font_family: str | None = None
    align: TextAlign | None = None
    border_top: bool | None = None
    border_bottom: bool | None = None
    border_left: bool | None = None
    border_right: bool | None = None

    @property
    def has_border(self) -> bool:
        return bool(
            self.border_top or self.border_bottom
            or self.border_left or self.border_right
        )

    def to_format(self) -> CellFormat:
        """Keep only the notable properties.

        Text/background colors equal to the black-on-white defaults are
        dropped; every other property is kept whenever it is set.
        """
        return CellFormat(
            bold=True if self.bold else None,
            italic=True if self.italic else None,
            color=self.color if self.color and self.color != DEFAULT_TEXT_COLOR else None,
            bg_color=self.bg_color if self.bg_color and self.bg_color != DEFAULT_BG_COLOR else None,
            font_size=self.font_size or None,
            font_family=self.font_family or None,
            align=self.align,
        )

    def to_borders(self) -> CellBorders:
        return CellBorders(
            top=bool(self.border_top),
            bottom=bool(self.border_bottom),
            left=bool(self.border_left),
            right=bool(self.border_right),
        )


# ── sparse cell entries ───────────────────────────────────────────────────


@dataclass
class CellFormat:
    """Formatting persisted for a single cell.

    JSON keys are camelCase (``bgColor``, ``fontSize``, ``fontFamily``).
    """

    bold: bool | None = None
    italic: bool | None = None
    color: str | None = None
    bg_color: str | None = None
    font_size: int | None = None
    font_family: str | None = None
    align: TextAlign | None = None

    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {}
        if self.bold:
            d["bold"] = True
        if self.italic:
            d["italic"] = True
        if self.color is not None:
            d["color"] = self.color
        if self.bg_color is not None:
            d["bgColor"] = self.bg_color
        if self.font_size is not None:
            d["fontSize"] = self.font_size
        if self.font_family is not None:
            d["fontFamily"] = self.font_family
        if self.align is not None:
            d["align"] = TextAlign(self.align).value
        return d


@dataclass
class CellBorders:
    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False

    def any(self) -> bool:
        return self.top or self.bottom or self.left or self.right

    def to_dict(self) -> dict[str, bool]:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }


# ── Document ──────────────────────────────────────────────────────────────


@dataclass
class Document:
    """A converted sheet: cell texts plus sparse formats and borders.

    ``formats`` and ``borders`` are keyed ``row → column → entry``; cells
    without anything notable are simply absent.
    """

    data: list[list[str]] = field(default_factory=list)
    formats: dict[int, dict[int, CellFormat]] = field(default_factory=dict)
    borders: dict[int, dict[int, CellBorders]] = field(default_factory=dict)
    version: int = DOCUMENT_VERSION

    @property
    def bordered_cell_count(self) -> int:
        return sum(len(cols) for cols in self.borders.values())

    # ── serialisation ──

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dictionary.

        Row and column indices become string keys, in insertion order.
        """
        return {
            "version": self.version,
            "data": [list(row) for row in self.data],
            "formats": _sparse_to_dict(self.formats),
            "borders": _sparse_to_dict(self.borders),
        }


def _sparse_to_dict(
    sparse: dict[int, dict[int, CellFormat]] | dict[int, dict[int, CellBorders]],
) -> dict[str, dict[str, Any]]:
    return {
        str(row): {str(col): entry.to_dict() for col, entry in cols.items()}
        for row, cols in sparse.items()
    }
