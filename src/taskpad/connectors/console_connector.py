# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import format_result, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    """
    Read lines from stdin until /exit or EOF.

    Lines starting with "/" go to the command registry; any other text is a
    shorthand for /add. The stats line is re-fetched after each mutation.
    """
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))
    _print_ts(f"[{app_name}] Type a task title to add it. Use /help for commands. Use /exit to quit.\n")

    changed = False

    def _on_change() -> None:
        nonlocal changed
        changed = True

    state.controller.subscribe(_on_change)
    print(command_registry.handle(state, "/list"))

    try:
        while True:
            try:
                user_input = input(f"{app_name}> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            changed = False
            try:
                if user_input.startswith("/"):
                    response = command_registry.handle(state, user_input)
                else:
                    response = format_result(state.controller.add_task(user_input))
            except Exception:
                logger.exception("Command handler crashed.")
                response = "Internal error while handling a command."

            if response is not None:
                _print_ts(response)
            if changed:
                _print_ts(state.controller.stats_line())
    finally:
        state.controller.unsubscribe(_on_change)

    logger.info("Console connector finished.")
