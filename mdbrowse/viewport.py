from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Viewport:
    """A scrollable window of ``height`` lines over a text buffer.

    Instances are immutable; every operation returns a new viewport whose
    offset satisfies ``0 <= offset <= max_offset``.
    """

    width: int = 0
    height: int = 0
    lines: Tuple[str, ...] = ()
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max(0, int(self.width)))
        object.__setattr__(self, "height", max(0, int(self.height)))
        object.__setattr__(self, "lines", tuple(self.lines))
        object.__setattr__(self, "offset", self._clamp(self.offset))

    @property
    def total_lines(self) -> int:
        return len(self.lines)

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    @property
    def at_top(self) -> bool:
        return self.offset == 0

    @property
    def at_bottom(self) -> bool:
        return self.offset >= self.max_offset

    @property
    def scroll_percent(self) -> float:
        if self.max_offset == 0:
            return 1.0
        return self.offset / self.max_offset

    def _clamp(self, offset: int) -> int:
        return min(max(0, int(offset)), self.max_offset)

    def with_content(self, lines: Sequence[str]) -> "Viewport":
        return replace(self, lines=tuple(lines), offset=0)

    def resize(self, width: int, height: int) -> "Viewport":
        # __post_init__ re-clamps the offset against the new height
        return replace(self, width=width, height=height)

    def scroll_by(self, delta: int) -> "Viewport":
        return replace(self, offset=self.offset + int(delta))

    def scroll_by_page(self, direction: int) -> "Viewport":
        step = 1 if direction > 0 else -1
        return self.scroll_by(step * self.height)

    def scroll_to_top(self) -> "Viewport":
        return replace(self, offset=0)

    def scroll_to_bottom(self) -> "Viewport":
        return replace(self, offset=self.max_offset)

    def visible_lines(self) -> Tuple[str, ...]:
        if len(self.lines) <= self.height:
            return self.lines
        return self.lines[self.offset:self.offset + self.height]

    def view(self) -> str:
        return "\n".join(self.visible_lines())
