from __future__ import annotations

from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Mapping, Optional

from .classify import PresentationType


@dataclass(frozen=True)
class StyleDirective:
    """
    Backend-neutral cell style. Colors are 6-digit RGB hex strings.
    None means "not set" for every attribute except bold/italic.
    """

    bold: bool = False
    italic: bool = False
    underline: Optional[str] = None          # None | "single"
    font_color: Optional[str] = None
    fill_color: Optional[str] = None         # solid fill
    border: Optional[str] = None             # None | "thin", all four sides
    horizontal_align: Optional[str] = None   # "left" | "center" | "right"
    vertical_align: Optional[str] = None     # "center"
    number_format: Optional[str] = None

    def merged(self, overlay: "StyleDirective") -> "StyleDirective":
        """Return self with every attribute the overlay sets taking precedence."""
        changes = {}
        for f in fields(overlay):
            v = getattr(overlay, f.name)
            if v is not None and v is not False:
                changes[f.name] = v
        return replace(self, **changes)


@dataclass(frozen=True)
class CellPosition:
    is_header: bool
    row_index: int = 0  # 0-based index among data rows

    @property
    def row_parity_even(self) -> bool:
        return self.row_index % 2 == 0


# ------------------------------
# Fixed rule set
# ------------------------------

HEADER_FILL = "4472C4"
EVEN_ROW_FILL = "F2F2F2"
ODD_ROW_FILL = "FFFFFF"
WHITE = "FFFFFF"
GREEN = "008000"
RED = "FF0000"
BLUE = "0000FF"
GRAY = "808080"

HEADER_STYLE = StyleDirective(
    bold=True,
    font_color=WHITE,
    fill_color=HEADER_FILL,
    border="thin",
    horizontal_align="center",
    vertical_align="center",
)
PLAIN_HEADER_STYLE = StyleDirective(bold=True)

TYPE_OVERLAYS: Mapping[PresentationType, StyleDirective] = MappingProxyType({
    PresentationType.INTEGER: StyleDirective(number_format="#,##0", horizontal_align="right"),
    PresentationType.FLOAT: StyleDirective(number_format="#,##0.00", horizontal_align="right"),
    PresentationType.DATE_VALUE: StyleDirective(number_format="mm/dd/yyyy", horizontal_align="center"),
    PresentationType.EMAIL_STRING: StyleDirective(
        horizontal_align="left", font_color=BLUE, underline="single"
    ),
    PresentationType.PLAIN_STRING: StyleDirective(horizontal_align="left"),
    PresentationType.COMPOSITE: StyleDirective(horizontal_align="left", italic=True, font_color=GRAY),
    PresentationType.EMPTY: StyleDirective(),
})

BOOLEAN_OVERLAYS: Mapping[bool, StyleDirective] = MappingProxyType({
    True: StyleDirective(horizontal_align="center", font_color=GREEN, bold=True),
    False: StyleDirective(horizontal_align="center", font_color=RED),
})


def base_style(position: CellPosition) -> StyleDirective:
    """Zebra fill plus thin border for a data cell."""
    fill = EVEN_ROW_FILL if position.row_parity_even else ODD_ROW_FILL
    return StyleDirective(fill_color=fill, border="thin")


def overlay_for(ptype: PresentationType, value: object = None) -> StyleDirective:
    if ptype is PresentationType.BOOLEAN:
        return BOOLEAN_OVERLAYS[bool(value)]
    return TYPE_OVERLAYS[ptype]


def style_for(
    ptype: Optional[PresentationType],
    value: object,
    position: CellPosition,
    formatting_enabled: bool = True,
) -> Optional[StyleDirective]:
    """
    Style directive for one cell, or None for an unstyled cell.

    ``value`` only matters for booleans (True -> green/bold, False -> red).
    ``ptype`` is ignored for header cells.
    """
    if position.is_header:
        return HEADER_STYLE if formatting_enabled else PLAIN_HEADER_STYLE
    if not formatting_enabled:
        return None
    return base_style(position).merged(overlay_for(ptype or PresentationType.EMPTY, value))
