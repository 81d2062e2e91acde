"""Tk front end; imported lazily so headless runs never load tkinter."""

from __future__ import annotations

from .app import MainWindow, run_app

__all__ = ["MainWindow", "run_app"]
