"""Todo screen view: entry header, item list with one inline editor, random button.

The view renders rows from ``row_format.build_rows`` and emits intent
callbacks to the app layer. It keeps no list state of its own.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional, Tuple

from ...domain.entities import TodoIcon, TodoItem
from ...viewmodels.row_format import TodoRow, tint_to_hex
from .theme import CARD_BG, TEXT


TraceBinding = Tuple[tk.Variable, str]


def release_trace(binding: Optional[TraceBinding]) -> None:
    """Remove the write trace held by ``binding``, if any."""
    if binding is None:
        return
    var, trace_id = binding
    var.trace_remove("write", trace_id)


class TodoScreenView(ttk.Frame):
    """
    Stateless todo screen. The header shows either the entry form or an
    "Editing item" title; each list row is either a clickable read row or the
    inline editor for the item under edit.
    """

    def __init__(
        self,
        parent,
        *,
        on_entry_text_change: Optional[Callable[[str], None]] = None,
        on_entry_icon_change: Optional[Callable[[TodoIcon], None]] = None,
        on_entry_submit: Optional[Callable[[], None]] = None,
        on_start_edit: Optional[Callable[[TodoItem], None]] = None,
        on_edit_item_change: Optional[Callable[[TodoItem], None]] = None,
        on_edit_done: Optional[Callable[[], None]] = None,
        on_remove_item: Optional[Callable[[TodoItem], None]] = None,
        on_add_random: Optional[Callable[[], None]] = None,
        **kwargs,
    ):
        super().__init__(parent, **kwargs)
        self.on_entry_text_change = on_entry_text_change
        self.on_entry_icon_change = on_entry_icon_change
        self.on_entry_submit = on_entry_submit
        self.on_start_edit = on_start_edit
        self.on_edit_item_change = on_edit_item_change
        self.on_edit_done = on_edit_done
        self.on_remove_item = on_remove_item
        self.on_add_random = on_add_random
        self._editor_trace: Optional[TraceBinding] = None

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self.header = ttk.Frame(self, style="Elevated.TFrame", padding=12)
        self.header.grid(row=0, column=0, sticky="ew")
        self.header.columnconfigure(0, weight=1)

        outer, self.list_frame = self._make_scroll_host(self)
        outer.grid(row=1, column=0, sticky="nsew", pady=(8, 0))

        ttk.Button(
            self,
            text="Add random item",
            style="Primary.TButton",
            command=lambda: self.on_add_random and self.on_add_random(),
        ).grid(row=2, column=0, sticky="ew", pady=(8, 0))

        self._entry_var = tk.StringVar(value="")
        self._entry_var.trace_add("write", self._on_entry_var_write)
        self._suppress_entry_trace = False
        self._entry_icons_host: Optional[ttk.Frame] = None
        self._entry_button: Optional[ttk.Button] = None
        self._header_mode: Optional[str] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_header(
        self,
        title: Optional[str],
        *,
        entry_text: str,
        entry_icon: TodoIcon,
        icons_visible: bool,
    ) -> None:
        """Show the entry form (``title is None``) or the editing title."""
        mode = "entry" if title is None else "title"
        if mode != self._header_mode:
            for child in self.header.winfo_children():
                child.destroy()
            self._entry_icons_host = None
            self._entry_button = None
            if title is None:
                self._build_entry_form()
                self.header.configure(style="Elevated.TFrame")
            else:
                ttk.Label(self.header, text=title, style="Title.TLabel", anchor="center").grid(
                    row=0, column=0, sticky="ew", pady=4
                )
                self.header.configure(style="Card.TFrame")
            self._header_mode = mode
        if title is None:
            self.set_entry_state(entry_text, entry_icon, icons_visible)

    def set_entry_state(self, text: str, icon: TodoIcon, icons_visible: bool) -> None:
        """Sync entry widgets without rebuilding the text field."""
        if self._entry_var.get() != text:
            self._suppress_entry_trace = True
            try:
                self._entry_var.set(text)
            finally:
                self._suppress_entry_trace = False
        if self._entry_button is not None:
            self._entry_button.state(["!disabled"] if icons_visible else ["disabled"])
        if self._entry_icons_host is None:
            return
        for child in self._entry_icons_host.winfo_children():
            child.destroy()
        if icons_visible:
            self._build_icon_row(
                self._entry_icons_host,
                icon,
                lambda picked: self.on_entry_icon_change and self.on_entry_icon_change(picked),
            )

    def render_rows(self, rows: List[TodoRow]) -> None:
        """Replace list rows with the projection of the latest snapshot."""
        release_trace(self._editor_trace)
        self._editor_trace = None
        for child in self.list_frame.winfo_children():
            child.destroy()
        for index, row in enumerate(rows):
            if row.editing:
                self._build_editor_row(index, row)
            else:
                self._build_read_row(index, row)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_entry_form(self) -> None:
        entry = ttk.Entry(self.header, textvariable=self._entry_var)
        entry.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        entry.bind("<Return>", lambda e: self.on_entry_submit and self.on_entry_submit())
        self._entry_button = ttk.Button(
            self.header,
            text="Add",
            command=lambda: self.on_entry_submit and self.on_entry_submit(),
        )
        self._entry_button.grid(row=0, column=1)
        self._entry_icons_host = ttk.Frame(self.header)
        self._entry_icons_host.grid(row=1, column=0, columnspan=2, sticky="w", pady=(8, 0))
        entry.focus_set()

    def _on_entry_var_write(self, *_args) -> None:
        if self._suppress_entry_trace:
            return
        if self.on_entry_text_change:
            self.on_entry_text_change(self._entry_var.get())

    def _build_read_row(self, index: int, row: TodoRow) -> None:
        frame = ttk.Frame(self.list_frame, style="Card.TFrame", padding=(16, 8))
        frame.grid(row=index, column=0, sticky="ew", pady=1)
        frame.columnconfigure(0, weight=1)
        task = ttk.Label(frame, text=row.item.task, style="Card.TLabel")
        task.grid(row=0, column=0, sticky="w")
        icon = tk.Label(
            frame,
            text=row.item.icon.glyph,
            fg=tint_to_hex(row.tint, foreground=TEXT, background=CARD_BG),
            bg=CARD_BG,
        )
        icon.grid(row=0, column=1, sticky="e")
        for widget in (frame, task, icon):
            widget.bind("<Button-1>", lambda e, item=row.item: self._emit_start_edit(item))

    def _build_editor_row(self, index: int, row: TodoRow) -> None:
        item = row.item
        frame = ttk.Frame(self.list_frame, style="Card.TFrame", padding=(16, 8))
        frame.grid(row=index, column=0, sticky="ew", pady=1)
        frame.columnconfigure(0, weight=1)

        text_var = tk.StringVar(value=item.task)

        def on_text_write(*_args) -> None:
            if self.on_edit_item_change:
                self.on_edit_item_change(item.with_task(text_var.get()))

        self._editor_trace = (text_var, text_var.trace_add("write", on_text_write))
        entry = ttk.Entry(frame, textvariable=text_var)
        entry.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        entry.bind("<Return>", lambda e: self.on_edit_done and self.on_edit_done())
        entry.focus_set()
        entry.icursor(tk.END)

        ttk.Button(
            frame,
            text="\U0001f4be",
            width=3,
            command=lambda: self.on_edit_done and self.on_edit_done(),
        ).grid(row=0, column=1)
        ttk.Button(
            frame,
            text="❌",
            width=3,
            command=lambda: self.on_remove_item and self.on_remove_item(item),
        ).grid(row=0, column=2)

        icons = ttk.Frame(frame, style="Card.TFrame")
        icons.grid(row=1, column=0, columnspan=3, sticky="w", pady=(8, 0))
        self._build_icon_row(
            icons,
            item.icon,
            lambda picked: self.on_edit_item_change and self.on_edit_item_change(
                item.with_task(text_var.get()).with_icon(picked)
            ),
        )

    def _build_icon_row(
        self,
        parent: tk.Widget,
        selected: TodoIcon,
        on_pick: Callable[[TodoIcon], None],
    ) -> None:
        for column, icon in enumerate(TodoIcon):
            style = "Selected.Icon.TButton" if icon is selected else "Icon.TButton"
            ttk.Button(
                parent,
                text=icon.glyph,
                width=3,
                style=style,
                command=lambda i=icon: on_pick(i),
            ).grid(row=0, column=column, padx=(0, 4))

    def _emit_start_edit(self, item: TodoItem) -> None:
        if self.on_start_edit:
            self.on_start_edit(item)

    def _make_scroll_host(self, parent: tk.Widget):
        """
        Create a scrollable host frame using Canvas + inner Frame pattern.
        Returns (outer, inner):
        - outer: frame to grid in the layout (contains canvas + scrollbar)
        - inner: content frame where list rows are gridded
        """
        outer = ttk.Frame(parent)
        outer.rowconfigure(0, weight=1)
        outer.columnconfigure(0, weight=1)

        canvas = tk.Canvas(outer, highlightthickness=0, bg=CARD_BG)
        vbar = ttk.Scrollbar(outer, orient="vertical", command=canvas.yview)
        canvas.configure(yscrollcommand=vbar.set)

        canvas.grid(row=0, column=0, sticky="nsew")
        vbar.grid(row=0, column=1, sticky="ns")

        inner = ttk.Frame(canvas)
        inner.columnconfigure(0, weight=1)
        window_id = canvas.create_window((0, 0), window=inner, anchor="nw")

        def _on_canvas_configure(event):
            canvas.itemconfigure(window_id, width=event.width)

        def _on_inner_configure(_event):
            canvas.configure(scrollregion=canvas.bbox("all"))

        def _on_mousewheel(event):
            delta = -1 * (event.delta // 120) if event.delta else 0
            canvas.yview_scroll(delta, "units")

        inner.bind("<Configure>", _on_inner_configure)
        canvas.bind("<Configure>", _on_canvas_configure)
        canvas.bind_all("<MouseWheel>", _on_mousewheel)

        return outer, inner


__all__ = ["TodoScreenView"]
