"""Shared visual theme for the todo desktop views.

The module centralizes ttk style tokens so the views render a cohesive look
without carrying styling logic in each individual view class.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BG = "#f3f5f9"
CARD_BG = "#ffffff"
BORDER = "#d9dfeb"
PRIMARY = "#2457ff"
TEXT = "#1f2937"
MUTED = "#64748b"


def apply_modern_theme(root: tk.Misc) -> None:
    """Apply a cohesive ttk + tk visual theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BG)

    style.configure(".", background=BG, foreground=TEXT)
    style.configure("TFrame", background=BG)
    style.configure("Card.TFrame", background=CARD_BG, relief="flat", borderwidth=1)
    style.configure("Elevated.TFrame", background=CARD_BG, relief="raised", borderwidth=1)
    style.configure("TLabel", background=BG, foreground=TEXT)
    style.configure("Card.TLabel", background=CARD_BG, foreground=TEXT)
    style.configure("Subtle.TLabel", background=BG, foreground=MUTED)
    style.configure("Title.TLabel", background=CARD_BG, foreground=TEXT, font=("TkDefaultFont", 14, "bold"))

    style.configure(
        "TButton",
        padding=(10, 6),
        background=CARD_BG,
        bordercolor=BORDER,
        relief="flat",
    )
    style.map("TButton", background=[("active", "#edf2ff")])
    style.configure("Primary.TButton", background=PRIMARY, foreground="#ffffff", bordercolor=PRIMARY)
    style.map("Primary.TButton", background=[("active", "#1b45ce")])
    style.configure("Icon.TButton", padding=(4, 2))
    style.configure("Selected.Icon.TButton", padding=(4, 2), background="#d9e4ff", bordercolor=PRIMARY)

    style.configure("TEntry", fieldbackground="#ffffff", bordercolor=BORDER)
