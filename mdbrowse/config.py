from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple


DEFAULT_ALLOWED_EXTS: Tuple[str, ...] = (".md",)
DEFAULT_NOTICE_DELAY: float = 1.0
DEFAULT_PADDING: int = 5
DEFAULT_PANEL_RATIO: float = 0.4
REJECTION_MESSAGE = "Only markdown files supported"
MARKDOWN_EXTS = frozenset({".md", ".markdown"})


def normalize_exts(exts: Iterable[str]) -> Tuple[str, ...]:
    """Return lower-cased, dot-prefixed, de-duplicated extensions in input order."""
    out = []
    for ext in exts:
        ext = str(ext).strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        if ext not in out:
            out.append(ext)
    return tuple(out)


def rejection_message_for(exts: Iterable[str]) -> str:
    """Notice shown when a file outside ``exts`` is opened."""
    exts = normalize_exts(exts)
    if all(ext in MARKDOWN_EXTS for ext in exts):
        return REJECTION_MESSAGE
    return f"Only {', '.join(exts)} files supported"


@dataclass(frozen=True)
class Settings:
    """Options resolved once at startup and shared read-only by the app."""

    start_dir: str = field(default_factory=os.getcwd)
    allowed_exts: Tuple[str, ...] = DEFAULT_ALLOWED_EXTS
    notice_delay: float = DEFAULT_NOTICE_DELAY
    padding: int = DEFAULT_PADDING
    panel_ratio: float = DEFAULT_PANEL_RATIO
    show_hidden: bool = False
    debug_keys: bool = False
    # Derived from allowed_exts when not given
    rejection_message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.notice_delay <= 0:
            raise ValueError(f"notice_delay must be positive, got {self.notice_delay!r}")
        if self.padding < 0:
            raise ValueError(f"padding must not be negative, got {self.padding!r}")
        if not 0 < self.panel_ratio <= 1:
            raise ValueError(f"panel_ratio must be in (0, 1], got {self.panel_ratio!r}")
        exts = normalize_exts(self.allowed_exts)
        if not exts:
            raise ValueError("at least one allowed extension is required")
        object.__setattr__(self, "allowed_exts", exts)
        if not self.rejection_message:
            object.__setattr__(self, "rejection_message", rejection_message_for(exts))
