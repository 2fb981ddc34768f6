"""Page controller: the application state and its transition function.

``update`` is pure apart from reading the selected file through ``loader``.
It never touches widgets or timers; instead it returns effects
(``ScheduleNoticeClear``, ``Quit``) for the runtime to carry out. Timer fires
come back in as ``NoticeExpired`` events through the same ``update`` call, so
tests can drive the whole state machine with synthetic events.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .config import Settings
from .debug import get_logger
from .keymap import (
    BACK_KEYS,
    BOTTOM_KEYS,
    LINE_DOWN_KEYS,
    LINE_UP_KEYS,
    PAGE_DOWN_KEYS,
    PAGE_UP_KEYS,
    QUIT_KEYS,
    TOP_KEYS,
)
from .layout import Layout
from .notifier import Notice, ScheduleNoticeClear, clear_notice, expire, raise_notice
from .utils import describe_load_error, read_lines
from .viewport import Viewport


class Page(enum.Enum):
    BROWSING = "browsing"
    VIEWING = "viewing"


@dataclass(frozen=True)
class Browsing:
    page = Page.BROWSING


@dataclass(frozen=True)
class Viewing:
    path: str
    viewport: Viewport
    error: Optional[str] = None
    page = Page.VIEWING


PageState = Union[Browsing, Viewing]


# ---- Events ----
@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Key:
    key: str


@dataclass(frozen=True)
class Scroll:
    delta: int


@dataclass(frozen=True)
class NoticeExpired:
    token: int


@dataclass(frozen=True)
class EntrySelected:
    path: str


@dataclass(frozen=True)
class EntryRejected:
    path: str


Event = Union[Resize, Key, Scroll, NoticeExpired, EntrySelected, EntryRejected]


# ---- Effects ----
@dataclass(frozen=True)
class Quit:
    pass


Effect = Union[ScheduleNoticeClear, Quit]

Loader = Callable[[str], Sequence[str]]


@dataclass(frozen=True)
class Model:
    settings: Settings
    layout: Layout
    screen: PageState = field(default_factory=Browsing)
    notice: Optional[Notice] = None
    notice_seq: int = 0
    quitting: bool = False

    @property
    def page(self) -> Page:
        return self.screen.page

    @property
    def selection(self) -> Optional[str]:
        if isinstance(self.screen, Viewing):
            return self.screen.path
        return None


def initial_model(settings: Settings, width: int = 0, height: int = 0) -> Model:
    layout = Layout(width=width, height=height, padding=settings.padding, panel_ratio=settings.panel_ratio)
    return Model(settings=settings, layout=layout)


def update(model: Model, event: Event, loader: Loader = read_lines) -> Tuple[Model, List[Effect]]:
    """Apply one event and return the next model plus effects to run."""
    if model.quitting:
        return model, []

    if isinstance(event, Resize):
        return _on_resize(model, event), []
    if isinstance(event, NoticeExpired):
        return replace(model, notice=expire(model.notice, event.token)), []
    if isinstance(event, EntrySelected):
        return _on_selected(model, event.path, loader), []
    if isinstance(event, EntryRejected):
        return _on_rejected(model)
    if isinstance(event, Key):
        return _on_key(model, event.key)
    if isinstance(event, Scroll):
        return _scroll(model, lambda vp: vp.scroll_by(event.delta)), []
    raise TypeError(f"unsupported event: {event!r}")


def _on_resize(model: Model, event: Resize) -> Model:
    layout = model.layout.resized(event.width, event.height)
    screen = model.screen
    if isinstance(screen, Viewing):
        viewport = screen.viewport.resize(layout.viewport_width, layout.viewport_height)
        screen = replace(screen, viewport=viewport)
    return replace(model, layout=layout, screen=screen)


def _on_selected(model: Model, path: str, loader: Loader) -> Model:
    if not isinstance(model.screen, Browsing):
        return model
    layout = model.layout
    viewport = Viewport(width=layout.viewport_width, height=layout.viewport_height)
    error: Optional[str] = None
    try:
        viewport = viewport.with_content(loader(path))
    except OSError as exc:
        get_logger("state").warning("load failed: path=%s error=%s", path, exc)
        error = describe_load_error(exc)
    return replace(
        model,
        screen=Viewing(path=path, viewport=viewport, error=error),
        notice=clear_notice(),
    )


def _on_rejected(model: Model) -> Tuple[Model, List[Effect]]:
    if not isinstance(model.screen, Browsing):
        return model, []
    settings = model.settings
    notice, effect = raise_notice(settings.rejection_message, settings.notice_delay, model.notice_seq)
    return replace(model, notice=notice, notice_seq=notice.token, screen=Browsing()), [effect]


def _on_key(model: Model, key: str) -> Tuple[Model, List[Effect]]:
    if key in QUIT_KEYS:
        return replace(model, quitting=True), [Quit()]
    if not isinstance(model.screen, Viewing):
        return model, []
    if key in BACK_KEYS:
        return replace(model, screen=Browsing()), []
    if key in LINE_UP_KEYS:
        return _scroll(model, lambda vp: vp.scroll_by(-1)), []
    if key in LINE_DOWN_KEYS:
        return _scroll(model, lambda vp: vp.scroll_by(1)), []
    if key in PAGE_UP_KEYS:
        return _scroll(model, lambda vp: vp.scroll_by_page(-1)), []
    if key in PAGE_DOWN_KEYS:
        return _scroll(model, lambda vp: vp.scroll_by_page(1)), []
    if key in TOP_KEYS:
        return _scroll(model, lambda vp: vp.scroll_to_top()), []
    if key in BOTTOM_KEYS:
        return _scroll(model, lambda vp: vp.scroll_to_bottom()), []
    return model, []


def _scroll(model: Model, move: Callable[[Viewport], Viewport]) -> Model:
    screen = model.screen
    if not isinstance(screen, Viewing):
        return model
    return replace(model, screen=replace(screen, viewport=move(screen.viewport)))
