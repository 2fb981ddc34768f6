from textual.binding import Binding


# Key names as Textual reports them. The page controller matches on these.
QUIT_KEYS = ("q", "ctrl+c")
BACK_KEYS = ("escape",)
LINE_UP_KEYS = ("up", "k")
LINE_DOWN_KEYS = ("down", "j")
PAGE_UP_KEYS = ("pageup",)
PAGE_DOWN_KEYS = ("pagedown",)
TOP_KEYS = ("home", "g")
BOTTOM_KEYS = ("end", "G")

MOUSE_WHEEL_DELTA = 3


def app_bindings() -> list[Binding]:
    """App-level bindings; each one forwards its key to the page controller."""
    bindings = [
        Binding("ctrl+c", "send_key('ctrl+c')", "Quit", show=False, priority=True),
        Binding("q", "send_key('q')", "Quit"),
        Binding("escape", "send_key('escape')", "Back"),
    ]
    for keys, description in (
        (LINE_UP_KEYS, "Up"),
        (LINE_DOWN_KEYS, "Down"),
        (PAGE_UP_KEYS, "Page Up"),
        (PAGE_DOWN_KEYS, "Page Down"),
        (TOP_KEYS, "Top"),
        (BOTTOM_KEYS, "Bottom"),
    ):
        for key in keys:
            bindings.append(Binding(key, f"send_key('{key}')", description, show=False))
    return bindings


def browser_bindings() -> list[Binding]:
    return [
        Binding("enter", "open_entry", "Open"),
        Binding("right", "open_entry", "Open", show=False),
        Binding("l", "open_entry", "Open", show=False),
        Binding("left", "go_up", "Up"),
        Binding("h", "go_up", "Up", show=False),
        Binding("backspace", "go_up", "Up", show=False),
        Binding("minus", "go_up", "Up", show=False),
        Binding("escape", "go_up", "Up", show=False),
        Binding("home", "goto_first_row", "First", show=False),
        Binding("g", "goto_first_row", "First", show=False),
        Binding("end", "goto_last_row", "Last", show=False),
        Binding("G", "goto_last_row", "Last", show=False),
        Binding("k", "cursor_up", "", show=False),
        Binding("j", "cursor_down", "", show=False),
    ]
