"""
MainWindowView
---------------
Tkinter main window for the todo GUI. This file contains **only View code**:
no list state. It exposes callback hooks that are expected to be connected
to ViewModels.

Notes:
- The window provides:
  * A host frame for the TodoScreenView (inserted later)
  * StatusBar at the bottom
- All external interactions are signaled via callbacks passed to the constructor.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .theme import apply_modern_theme


class MainWindowView(tk.Tk):
    """Top-level application window.

    This class is UI-only. It defines layout containers and wires global
    shortcuts to callbacks provided by the app layer.
    """

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        on_cancel_edit: OnVoid = None,
        on_add_random: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("Todo – State Lifting")
        self.geometry("520x680")
        self.minsize(420, 480)
        apply_modern_theme(self)

        self._on_cancel_edit = on_cancel_edit
        self._on_add_random = on_add_random

        # ---- Layout: 2 rows (Main, Status) ----
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.screen_host = ttk.Frame(self)
        self.screen_host.grid(row=0, column=0, sticky="nsew", padx=8, pady=(8, 4))

        self._build_statusbar(self)

        self.bind("<Escape>", lambda e: self._on_cancel_edit and self._on_cancel_edit())
        self.bind("<Control-r>", lambda e: self._on_add_random and self._on_add_random())

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=1, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(1, weight=1)

        ttk.Label(status, text="Items:", style="Subtle.TLabel").grid(row=0, column=0, sticky="w")
        self.lbl_count = ttk.Label(status, text="0", style="Subtle.TLabel")
        self.lbl_count.grid(row=0, column=1, sticky="w", padx=(4, 0))

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var, style="Subtle.TLabel").grid(
            row=0, column=2, sticky="e"
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_status(self, message: str) -> None:
        self.status_message_var.set(message)

    def set_item_count(self, count: int) -> None:
        self.lbl_count.configure(text=str(count))
