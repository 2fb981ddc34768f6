from __future__ import annotations

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import Footer, Header, Static

from .browser import DirectoryBrowser
from .config import Settings
from .debug import get_logger
from .keymap import MOUSE_WHEEL_DELTA, app_bindings
from .notifier import ScheduleNoticeClear
from .render import Frame, render_frame
from .state import (
    EntryRejected,
    EntrySelected,
    Event,
    Key,
    Model,
    NoticeExpired,
    Page,
    Quit,
    Resize,
    Scroll,
    initial_model,
    update,
)
from .tips import browser_tips, viewer_tips
from .utils import safe_call
from .version import __version__


class ContentPane(Static):
    """Read-only text panel fed from the viewport window.

    Wheel events are turned into scroll events for the page controller rather
    than scrolling the widget itself.
    """

    can_focus = True

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        self.app.feed(Scroll(-MOUSE_WHEEL_DELTA))  # type: ignore[attr-defined]
        event.stop()

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        self.app.feed(Scroll(MOUSE_WHEEL_DELTA))  # type: ignore[attr-defined]
        event.stop()


class MarkdownBrowserApp(App):
    TITLE = "mdbrowse"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    #stage {
        align: center middle;
        height: 1fr;
    }

    #picker, #viewer {
        height: auto;
        max-height: 100%;
    }

    #viewer { display: none; }
    .viewing #picker { display: none; }
    .viewing #viewer { display: block; }

    #notice { color: $text-muted; }
    #notice.error { color: $error; text-style: bold; }

    #browser { height: auto; max-height: 100%; }

    #title { text-style: bold; }
    #content { overflow: hidden; }
    """

    BINDINGS = app_bindings()

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.logr = get_logger("tui")
        self.settings = settings
        self.model: Model = initial_model(settings)

    def compose(self) -> ComposeResult:
        yield Header()
        self.notice_bar = Static("", id="notice")
        self.browser = DirectoryBrowser(
            self.settings.start_dir,
            allowed_exts=self.settings.allowed_exts,
            show_hidden=self.settings.show_hidden,
            debug_keys=self.settings.debug_keys,
            id="browser",
        )
        self.title_bar = Static("", id="title")
        self.content_pane = ContentPane("", id="content")
        self.stage = Container(
            Vertical(self.notice_bar, self.browser, id="picker"),
            Vertical(self.title_bar, self.content_pane, id="viewer"),
            id="stage",
        )
        yield self.stage
        self.tips = Static("", id="tips")
        yield self.tips
        yield Footer()

    def on_mount(self) -> None:
        self.logr.debug("on_mount: start_dir=%s size=%s", self.settings.start_dir, self.size)
        self.feed(Resize(self.size.width, self.size.height))
        safe_call(self.browser.focus)

    # ---- Event sources ----
    def on_resize(self, event: events.Resize) -> None:
        self.feed(Resize(event.size.width, event.size.height))

    def action_send_key(self, key: str) -> None:
        self.feed(Key(key))

    def on_directory_browser_entry_accepted(self, message: DirectoryBrowser.EntryAccepted) -> None:
        self.feed(EntrySelected(message.path))

    def on_directory_browser_entry_rejected(self, message: DirectoryBrowser.EntryRejected) -> None:
        self.feed(EntryRejected(message.path))

    # ---- Single dispatch point ----
    def feed(self, event: Event) -> None:
        """Run one event through the page controller, then apply effects and redraw."""
        previous = self.model.page
        self.model, effects = update(self.model, event)
        if self.settings.debug_keys:
            self.logr.debug("dispatch: event=%s page=%s effects=%s", event, self.model.page, effects)
        for effect in effects:
            self._run_effect(effect)
        if self.model.quitting:
            return
        self._draw_frame(render_frame(self.model))
        if previous != self.model.page:
            self.logr.debug("page: %s -> %s selection=%s", previous.value, self.model.page.value, self.model.selection)
            self._focus_for_page()

    def _run_effect(self, effect: object) -> None:
        if isinstance(effect, ScheduleNoticeClear):
            token = effect.token
            self.set_timer(effect.delay, lambda: self.feed(NoticeExpired(token)), name=f"notice-clear-{token}")
        elif isinstance(effect, Quit):
            self.exit()

    def _focus_for_page(self) -> None:
        if self.model.page is Page.VIEWING:
            self.call_after_refresh(self.content_pane.focus)
        else:
            self.call_after_refresh(self.browser.focus)

    # ---- Rendering ----
    def _draw_frame(self, frame: Frame) -> None:
        if getattr(self, "stage", None) is None:
            # Resize can arrive before compose
            return
        self.stage.set_class(frame.viewing, "viewing")
        width = max(frame.panel_width, 1)
        for panel in (self.query_one("#picker"), self.query_one("#viewer")):
            panel.styles.width = width
            panel.styles.padding = (0, frame.padding)
        if frame.viewing:
            self.title_bar.update(Text(frame.title))
            self.content_pane.update(Text(frame.body, no_wrap=True, overflow="crop"))
            self.tips.update(viewer_tips(frame.status))
        else:
            self.notice_bar.update(Text(frame.header))
            self.notice_bar.set_class(frame.header_is_error, "error")
            self.tips.update(browser_tips())

