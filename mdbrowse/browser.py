from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

from textual.message import Message
from textual.widgets import DataTable

from .debug import get_logger
from .formatting import format_size, format_timestamp
from .keymap import browser_bindings

PARENT_KEY = ".."


@dataclass(frozen=True)
class Entry:
    name: str
    path: str
    is_dir: bool
    size: int = 0
    mtime: float = 0.0


def list_directory(directory: str, show_hidden: bool = False) -> List[Entry]:
    """List ``directory``: folders first, then files, each sorted case-insensitively.

    Raises ``OSError`` when the directory cannot be read.
    """
    dirs: List[Entry] = []
    files: List[Entry] = []
    for name in sorted(os.listdir(directory), key=str.lower):
        if not show_hidden and name.startswith("."):
            continue
        full = os.path.join(directory, name)
        try:
            st = os.stat(full)
        except OSError:
            # Dangling symlink or entry removed since listdir
            continue
        if os.path.isdir(full):
            dirs.append(Entry(name=name, path=full, is_dir=True, mtime=st.st_mtime))
        else:
            files.append(Entry(name=name, path=full, is_dir=False, size=st.st_size, mtime=st.st_mtime))
    return dirs + files


def is_allowed(path: str, allowed_exts: Sequence[str]) -> bool:
    return os.path.splitext(path)[1].lower() in {e.lower() for e in allowed_exts}


def classify(entry: Entry, allowed_exts: Sequence[str]) -> str:
    """Return ``"directory"``, ``"accept"`` or ``"reject"`` for an opened entry."""
    if entry.is_dir:
        return "directory"
    return "accept" if is_allowed(entry.path, allowed_exts) else "reject"


class DirectoryBrowser(DataTable):
    """Row-per-entry listing of one directory.

    Opening a directory navigates into it. Opening a file posts exactly one of
    :class:`EntryAccepted` or :class:`EntryRejected`; the browser keeps no
    record of what was picked.
    """

    BINDINGS = browser_bindings()

    class EntryAccepted(Message):
        def __init__(self, path: str) -> None:
            super().__init__()
            self.path = path

    class EntryRejected(Message):
        def __init__(self, path: str) -> None:
            super().__init__()
            self.path = path

    def __init__(
        self,
        directory: str,
        *,
        allowed_exts: Sequence[str] = (".md",),
        show_hidden: bool = False,
        debug_keys: bool = False,
        id: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, cursor_type="row", zebra_stripes=False)
        self.logr = get_logger("browser")
        self._debug_keys = debug_keys
        self.current_directory = os.path.abspath(directory)
        self.allowed_exts = tuple(allowed_exts)
        self.show_hidden = show_hidden
        self._entries: List[Entry] = []
        self._row_keys: List[str] = []
        # Name of the directory just left, highlighted after going up
        self._highlight_name: Optional[str] = None

    def on_mount(self) -> None:
        self.add_column("Name", key="name")
        self.add_column("Size", key="size", width=8)
        self.add_column("Modified", key="modified", width=16)
        self.load_directory(self.current_directory)

    @property
    def entries(self) -> List[Entry]:
        return list(self._entries)

    def load_directory(self, directory: str) -> bool:
        """Show ``directory``; on failure keep the current listing and return False."""
        directory = os.path.abspath(directory)
        try:
            entries = list_directory(directory, self.show_hidden)
        except OSError as e:
            self.logr.warning("listdir failed for %s: %s", directory, e)
            self._highlight_name = None
            return False
        self.current_directory = directory
        self._entries = entries
        self.logr.debug("load_directory: path=%s entries=%d", directory, len(entries))
        self._render_entries()
        return True

    def _render_entries(self) -> None:
        self.clear(columns=False)
        self._row_keys = []
        if os.path.dirname(self.current_directory) != self.current_directory:
            self.add_row(PARENT_KEY + "/", "", "", key=PARENT_KEY)
            self._row_keys.append(PARENT_KEY)
        cursor_row = 0
        for entry in self._entries:
            if entry.is_dir:
                name, size = entry.name + "/", ""
            else:
                name, size = entry.name, format_size(entry.size)
            if self._highlight_name and entry.name == self._highlight_name:
                cursor_row = len(self._row_keys)
            self.add_row(name, size, format_timestamp(entry.mtime), key=entry.path)
            self._row_keys.append(entry.path)
        self._highlight_name = None
        if self.row_count:
            self.move_cursor(row=cursor_row)

    def _selected_key(self) -> Optional[str]:
        try:
            return self._row_keys[self.cursor_row]
        except IndexError:
            return None

    def _entry_for(self, key: str) -> Optional[Entry]:
        for entry in self._entries:
            if entry.path == key:
                return entry
        return None

    def action_open_entry(self) -> None:
        key = self._selected_key()
        if self._debug_keys:
            self.logr.debug("open_entry: %s", key)
        if key is None:
            return
        if key == PARENT_KEY:
            self.action_go_up()
            return
        entry = self._entry_for(key)
        if entry is None:
            return
        kind = classify(entry, self.allowed_exts)
        if kind == "directory":
            self.load_directory(entry.path)
        elif kind == "accept":
            self.post_message(self.EntryAccepted(entry.path))
        else:
            self.post_message(self.EntryRejected(entry.path))

    def action_go_up(self) -> None:
        parent = os.path.dirname(self.current_directory)
        if parent == self.current_directory:
            return
        self._highlight_name = os.path.basename(self.current_directory)
        self.load_directory(parent)

    def action_goto_first_row(self) -> None:
        if self.row_count:
            self.move_cursor(row=0)

    def action_goto_last_row(self) -> None:
        if self.row_count:
            self.move_cursor(row=self.row_count - 1)
