"""Tk main window wiring widgets to ``ai_clipboard.commands``."""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, ttk

from ..clipboard import copy_text_to_clipboard
from ..commands import CommandResult, dispatch
from ..config import load_user_config, save_user_config
from ..export import FEEDBACK_SECONDS
from ..file_tree_model import TreeNode
from ..state import AppState
from .options import OptionsDialog

logger = logging.getLogger(__name__)

WINDOW_TITLE = "AI Clipboard"
COPY_BUTTON_TEXT = "Copy Selected Files to Clipboard"
CHECKED_GLYPH = "☑"
UNCHECKED_GLYPH = "☐"


def node_label(node: TreeNode) -> str:
    glyph = CHECKED_GLYPH if node.checked else UNCHECKED_GLYPH
    return f"{glyph} {node.name}"


class MainWindow:
    def __init__(self, root: tk.Tk, state: AppState, config_path: Path | None = None) -> None:
        self.root = root
        self.state = state
        self.config_path = config_path
        self._feedback_job: str | None = None

        root.title(WINDOW_TITLE)
        root.geometry("800x600")

        top = ttk.Frame(root, padding=(4, 4))
        top.pack(side="top", fill="x")
        ttk.Button(top, text="Select Folder...", command=self.select_folder).pack(side="left")
        ttk.Button(top, text="Reset Selections", command=lambda: self._run("reset")).pack(side="left", padx=(4, 0))
        ttk.Button(top, text="Select All", command=lambda: self._run("select_all")).pack(side="left", padx=(4, 0))
        ttk.Button(top, text="Refresh", command=lambda: self._run("refresh", rebuild=True)).pack(side="left", padx=(4, 0))
        ttk.Button(top, text="Options...", command=self.open_options).pack(side="left", padx=(4, 0))

        self.recent_button = ttk.Menubutton(top, text="Recent")
        self.recent_menu = tk.Menu(self.recent_button, tearoff=False)
        self.recent_button["menu"] = self.recent_menu
        self.recent_button.pack(side="left", padx=(4, 0))

        self.copy_button = ttk.Button(root, text=COPY_BUTTON_TEXT, command=self.copy_selected)
        self.copy_button.pack(side="bottom", fill="x", ipady=6)

        tree_frame = ttk.Frame(root)
        tree_frame.pack(side="top", fill="both", expand=True)
        self.tree = ttk.Treeview(tree_frame, show="tree", selectmode="browse")
        scrollbar = ttk.Scrollbar(tree_frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        self.tree.pack(side="left", fill="both", expand=True)
        self.tree.bind("<Button-1>", self._on_click)
        self.tree.bind("<space>", self._on_space)

        root.protocol("WM_DELETE_WINDOW", self.close)
        self._rebuild_recent_menu()

    # Commands

    def _run(self, name: str, *args: object, rebuild: bool = False) -> CommandResult:
        result = dispatch(self.state, name, *args)
        if result.message:
            logger.info(result.message)
            self.show_feedback(result.message)
        if rebuild:
            self._populate()
        elif result.changed:
            self._render_checks()
        return result

    def start(self, path: Path | None) -> None:
        if path is not None:
            self.open_folder(path)
            return
        dispatch(self.state, "restore_session")
        self._populate()

    def open_folder(self, path: Path) -> None:
        self._run("open_folder", path, rebuild=True)
        self._rebuild_recent_menu()

    def select_folder(self) -> None:
        chosen = filedialog.askdirectory(parent=self.root, title="Select a folder to load into the tree")
        if chosen:
            self.open_folder(Path(chosen))

    def open_options(self) -> None:
        config = self.state.config
        values = OptionsDialog(self.root, config.include_binaries, config.effective_ignore_patterns()).show()
        if values is None:
            return
        self._run("apply_options", values.include_binaries, values.ignore_text, rebuild=True)

    def copy_selected(self) -> None:
        result = dispatch(self.state, "copy", self._write_clipboard)
        self.show_feedback(result.message or COPY_BUTTON_TEXT)

    def close(self) -> None:
        dispatch(self.state, "snapshot_config")
        save_user_config(self.state.config, self.config_path)
        self.root.destroy()

    def _write_clipboard(self, text: str) -> bool:
        if copy_text_to_clipboard(text):
            return True
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
        except tk.TclError as exc:
            logger.warning("Tk clipboard write failed: %s", exc)
            return False
        return True

    # Feedback

    def show_feedback(self, message: str) -> None:
        """Show ``message`` on the copy button, reverting after a fixed delay."""
        self.copy_button.configure(text=message)
        if self._feedback_job is not None:
            self.root.after_cancel(self._feedback_job)
        self._feedback_job = self.root.after(int(FEEDBACK_SECONDS * 1000), self._revert_feedback)

    def _revert_feedback(self) -> None:
        self._feedback_job = None
        self.copy_button.configure(text=COPY_BUTTON_TEXT)

    # Tree rendering

    def _populate(self) -> None:
        self.tree.delete(*self.tree.get_children())
        if self.state.tree is None:
            return

        def insert(node: TreeNode, parent: str) -> None:
            iid = str(node.path)
            self.tree.insert(parent, "end", iid=iid, text=node_label(node), open=node.expanded)
            for child in node.children:
                insert(child, iid)

        insert(self.state.tree, "")
        self.root.title(f"{WINDOW_TITLE} - {self.state.root}")

    def _render_checks(self) -> None:
        if self.state.tree is None:
            return
        for node in self.state.tree.iter_nodes():
            iid = str(node.path)
            if self.tree.exists(iid):
                self.tree.item(iid, text=node_label(node))

    def _toggle_item(self, iid: str) -> None:
        if self.state.tree is None or not iid:
            return
        node = self.state.tree.find(Path(iid))
        if node is None:
            return
        self._run("toggle", node.path, not node.checked)

    def _on_click(self, event: tk.Event) -> str | None:
        if self.tree.identify_region(event.x, event.y) != "tree":
            return None
        element = self.tree.identify_element(event.x, event.y)
        if "text" not in element:
            return None
        self._toggle_item(self.tree.identify_row(event.y))
        return None

    def _on_space(self, _event: tk.Event) -> str:
        self._toggle_item(self.tree.focus())
        return "break"

    def _rebuild_recent_menu(self) -> None:
        self.recent_menu.delete(0, "end")
        projects = self.state.config.previous_projects
        if not projects:
            self.recent_menu.add_command(label="(none)", state="disabled")
            return
        for project in reversed(projects):
            self.recent_menu.add_command(label=project, command=lambda p=project: self.open_folder(Path(p)))


def run_app(path: Path | None = None, config_path: Path | None = None) -> None:
    """Create the Tk root, restore or open a folder, and run the event loop."""
    root = tk.Tk()
    state = AppState(config=load_user_config(config_path))
    window = MainWindow(root, state, config_path=config_path)
    window.start(path)
    root.mainloop()
