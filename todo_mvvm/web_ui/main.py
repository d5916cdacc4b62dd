"""NiceGUI entrypoint for the todo web runtime."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Dict

from nicegui import ui

from todo_mvvm.domain.entities import TodoIcon
from todo_mvvm.utils import logging as logging_utils
from todo_mvvm.viewmodels.entry_vm import EntryVM
from todo_mvvm.viewmodels.row_format import TodoRow
from todo_mvvm.viewmodels.todo_vm import TodoSnapshot
from todo_mvvm.web_ui.runtime import PageSubscription, WebRuntime


LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --todo-card: #ffffff;
  --todo-border: #d9dfeb;
  --todo-accent: #2457ff;
}
body { background: #f3f5f9; }
.todo-page { max-width: 640px; margin: 0 auto; padding: 14px; }
.todo-card {
  background: var(--todo-card);
  border: 1px solid var(--todo-border);
  border-radius: 12px;
}
.todo-row { cursor: pointer; }
</style>
        """
    )


def _notify_status(runtime: WebRuntime) -> None:
    """Render the latest runtime status as a NiceGUI toast."""
    ui.notify(runtime.status_message, color="negative", close_button="OK")


def _icon_picker(selected: TodoIcon, on_pick) -> None:
    """Row of icon buttons; the selected icon is highlighted."""
    with ui.row().classes("q-gutter-xs"):
        for icon in TodoIcon:
            ui.button(
                icon=icon.material_name,
                color="primary" if icon is selected else "grey-5",
                on_click=lambda _, i=icon: on_pick(i),
            ).props("flat round dense").tooltip(icon.description)


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    async def index() -> None:
        entry_vm: EntryVM = runtime.make_entry_vm()
        page_state: Dict[str, Any] = {"typing": False, "header": runtime.header()}

        def on_entry_text(value: Any) -> None:
            entry_vm.set_text(value)
            render_entry_icons.refresh()

        def on_entry_icon(icon: TodoIcon) -> None:
            entry_vm.set_icon(icon)
            render_entry_icons.refresh()

        def submit_entry() -> None:
            if entry_vm.submit() is not None:
                render_header.refresh()

        def on_editor_text(value: Any) -> None:
            page_state["typing"] = True
            try:
                if not runtime.change_edit_task(str(value or "")):
                    _notify_status(runtime)
            finally:
                page_state["typing"] = False

        def on_editor_icon(icon: TodoIcon) -> None:
            if not runtime.change_edit_icon(icon):
                _notify_status(runtime)

        @ui.refreshable
        def render_entry_icons() -> None:
            if entry_vm.icons_visible:
                _icon_picker(entry_vm.icon, on_entry_icon)

        @ui.refreshable
        def render_header() -> None:
            with ui.card().classes("todo-card w-full q-pa-md"):
                title = runtime.header()
                if title is not None:
                    ui.label(title).classes("text-h6 w-full text-center")
                    return
                with ui.row().classes("w-full items-center no-wrap"):
                    ui.input(
                        label="New task",
                        value=entry_vm.text,
                        on_change=lambda e: on_entry_text(e.value),
                    ).props("outlined dense").classes("col-grow").on("keydown.enter", submit_entry)
                    ui.button("Add", on_click=submit_entry, color="primary")
                render_entry_icons()

        def render_read_row(row: TodoRow) -> None:
            with ui.row().classes("todo-row w-full items-center justify-between q-px-md q-py-sm").on(
                "click", lambda _, rid=row.row_id: runtime.start_edit(rid)
            ):
                ui.label(row.item.task)
                ui.icon(row.item.icon.material_name).style(f"opacity: {row.tint:.2f}").tooltip(
                    row.item.icon.description
                )

        def render_editor_row(row: TodoRow) -> None:
            with ui.column().classes("todo-card w-full q-pa-sm"):
                with ui.row().classes("w-full items-center no-wrap"):
                    ui.input(
                        value=row.item.task,
                        on_change=lambda e: on_editor_text(e.value),
                    ).props("outlined dense autofocus").classes("col-grow").on(
                        "keydown.enter", runtime.finish_edit
                    )
                    ui.button("\U0001f4be", on_click=runtime.finish_edit).props("flat dense").tooltip("Save")
                    ui.button(
                        "❌", on_click=lambda _, rid=row.row_id: runtime.delete_item(rid)
                    ).props("flat dense").tooltip("Delete")
                _icon_picker(row.item.icon, on_editor_icon)

        @ui.refreshable
        def render_list() -> None:
            with ui.column().classes("w-full q-gutter-xs"):
                for row in runtime.rows():
                    if row.editing:
                        render_editor_row(row)
                    else:
                        render_read_row(row)

        def on_changed(_snapshot: TodoSnapshot) -> None:
            header = runtime.header()
            if header != page_state["header"]:
                page_state["header"] = header
                render_header.refresh()
            if not page_state["typing"]:
                render_list.refresh()

        with ui.column().classes("todo-page w-full"):
            render_header()
            render_list()
            ui.button(
                "Add random item",
                on_click=lambda: runtime.add_random_item(),
                color="primary",
            ).classes("w-full")

        subscription = PageSubscription(runtime, on_changed)
        subscription.attach()
        client = ui.context.client
        client.on_connect(subscription.attach)
        client.on_disconnect(subscription.detach)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the todo NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--debug", action="store_true", default=logging_utils.env_requests_debug())
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root()
    level = logging_utils.apply_debug_preference(args.debug)
    LOGGER.info("Starting todo web UI (log level %s)", logging_utils.level_name(level))
    runtime = WebRuntime()
    if args.smoke_test:
        item = runtime.add_random_item()
        print("web-smoke-ok", len(runtime.rows()), item.icon.name)
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="Todo",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("TODO_WEB_STORAGE_SECRET", "todo-web-ui-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
