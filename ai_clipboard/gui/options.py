"""Modal options dialog: binary inclusion and ignore-pattern editor."""

from __future__ import annotations

import tkinter as tk
from dataclasses import dataclass
from tkinter import scrolledtext, ttk


@dataclass(frozen=True)
class OptionsValues:
    include_binaries: bool
    ignore_text: str


class OptionsDialog:
    """Collects new option values; ``result`` stays ``None`` on cancel."""

    def __init__(self, parent: tk.Misc, include_binaries: bool, ignore_patterns: list[str]) -> None:
        self.result: OptionsValues | None = None
        self.win = tk.Toplevel(parent)
        self.win.title("Options")
        self.win.geometry("600x400")
        self.win.resizable(False, False)
        self.win.transient(parent)

        body = ttk.Frame(self.win, padding=10)
        body.pack(fill="both", expand=True)

        self._include_binaries = tk.BooleanVar(value=include_binaries)
        ttk.Checkbutton(body, text="Include binary files?", variable=self._include_binaries).pack(anchor="w")

        ttk.Label(body, text="Ignore Patterns (one per line):").pack(anchor="w", pady=(10, 2))
        self._patterns = scrolledtext.ScrolledText(body, height=12, wrap="none")
        self._patterns.pack(fill="both", expand=True)
        self._patterns.insert("1.0", "\n".join(ignore_patterns))

        buttons = ttk.Frame(body)
        buttons.pack(fill="x", pady=(10, 0))
        ttk.Button(buttons, text="Save", command=self._save).pack(side="right")
        ttk.Button(buttons, text="Cancel", command=self._cancel).pack(side="right", padx=(0, 6))

        self.win.protocol("WM_DELETE_WINDOW", self._cancel)
        self.win.bind("<Escape>", lambda _event: self._cancel())

    def _save(self) -> None:
        self.result = OptionsValues(
            include_binaries=bool(self._include_binaries.get()),
            ignore_text=self._patterns.get("1.0", "end"),
        )
        self.win.destroy()

    def _cancel(self) -> None:
        self.result = None
        self.win.destroy()

    def show(self) -> OptionsValues | None:
        """Block until the dialog closes and return the saved values."""
        self.win.grab_set()
        self.win.wait_window()
        return self.result
