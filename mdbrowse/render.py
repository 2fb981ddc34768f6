from __future__ import annotations

from dataclasses import dataclass

from .state import Model, Viewing
from .utils import display_name

PICK_PROMPT = "Pick a file:"


@dataclass(frozen=True)
class Frame:
    """Everything the widgets need to draw one state of the app."""

    viewing: bool
    header: str
    header_is_error: bool
    title: str
    body: str
    status: str
    panel_width: int
    padding: int


def _status_line(screen: Viewing) -> str:
    vp = screen.viewport
    if screen.error is not None or not vp.total_lines:
        return ""
    first = vp.offset + 1
    last = vp.offset + len(vp.visible_lines())
    return f"{first}-{last}/{vp.total_lines} {int(round(vp.scroll_percent * 100))}%"


def render_frame(model: Model) -> Frame:
    layout = model.layout
    screen = model.screen
    if isinstance(screen, Viewing):
        body = screen.error if screen.error is not None else screen.viewport.view()
        return Frame(
            viewing=True,
            header="",
            header_is_error=False,
            title=display_name(screen.path),
            body=body,
            status=_status_line(screen),
            panel_width=layout.panel_width,
            padding=layout.padding,
        )
    notice = model.notice
    return Frame(
        viewing=False,
        header=notice.message if notice is not None else PICK_PROMPT,
        header_is_error=notice is not None,
        title="",
        body="",
        status="",
        panel_width=layout.panel_width,
        padding=layout.padding,
    )
