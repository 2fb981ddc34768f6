from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_PADDING, DEFAULT_PANEL_RATIO

# Rows always taken by Header, title bar, tips line and Footer
CHROME_ROWS = 4


@dataclass(frozen=True)
class Layout:
    """Terminal geometry and the panel sizes derived from it.

    Recomputed on every resize; nothing here is persisted.
    """

    width: int = 0
    height: int = 0
    padding: int = DEFAULT_PADDING
    panel_ratio: float = DEFAULT_PANEL_RATIO

    @property
    def panel_width(self) -> int:
        return int(round(self.width * self.panel_ratio))

    @property
    def viewport_width(self) -> int:
        return max(1, self.panel_width - 2 * self.padding)

    @property
    def viewport_height(self) -> int:
        # Reserve at least the chrome rows
        return max(1, self.height - max(2 * self.padding, CHROME_ROWS))

    def resized(self, width: int, height: int) -> "Layout":
        return Layout(width=max(0, int(width)), height=max(0, int(height)), padding=self.padding, panel_ratio=self.panel_ratio)
