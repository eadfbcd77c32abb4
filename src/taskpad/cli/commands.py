# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable
from typing import cast

from ..core.results import Error, Info, OperationResult, Success
from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler2 = Callable[[AppState, list[str]], str]
# Third argument is the raw text after the command word, whitespace kept.
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head = line[1:].split(maxsplit=1)
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head[0].lower()
        text = head[1] if len(head) > 1 else ""
        args = text.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 2

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, text)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_result(result: OperationResult) -> str:
    match result:
        case Success(message=message):
            return f"[ok] {message}"
        case Error(message=message):
            return f"[error] {message}"
        case Info(message=message):
            return f"[info] {message}"


def format_task_line(task: Task) -> str:
    line = f"{task.id:>3}. {task.summary()}"
    if task.description:
        line += f" - {task.description}"
    return line


def _format_listing(header: str, tasks: Iterable[Task], empty: str) -> str:
    lines = [format_task_line(t) for t in tasks]
    if not lines:
        return f"{header}\n  {empty}"
    return "\n".join([header, *lines])


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    raw = args[0].rstrip(".").lstrip("#")
    if not raw.isdecimal():
        return None
    return int(raw)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list          -> all tasks
    /list done     -> completed tasks only
    /list pending  -> pending tasks only
    """
    ctl = state.controller
    scope = args[0].lower() if args else "all"

    if scope in ("all", "a"):
        body = _format_listing("Tasks:", ctl.list_tasks(), "(no tasks)")
    elif scope in ("done", "completed", "d"):
        body = _format_listing("Completed tasks:", ctl.completed_tasks(), "(none)")
    elif scope in ("pending", "todo", "p"):
        body = _format_listing("Pending tasks:", ctl.pending_tasks(), "(none)")
    else:
        return "Usage: /list [all|done|pending]"

    return f"{body}\n{ctl.stats_line()}"


def cmd_add(state: AppState, args: list[str], text: str) -> str:
    """/add <title> [| description]"""
    title, _, description = text.partition("|")
    return format_result(state.controller.add_task(title, description))


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    return format_result(state.controller.toggle_completed(task_id))


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    result = state.controller.delete_task(task_id)
    if isinstance(result, Success) and result.task is not None:
        state.last_deleted = result.task
        return f"{format_result(result)} (use /undo to add it back as a new task)"
    return format_result(result)


def cmd_undo(state: AppState, args: list[str]) -> str:
    deleted = state.last_deleted
    if deleted is None:
        return format_result(Info("nothing to undo"))
    result = state.controller.restore(deleted)
    if isinstance(result, Success):
        state.last_deleted = None
    return format_result(result)


def cmd_find(state: AppState, args: list[str], text: str) -> str:
    query = text
    found = state.controller.search(query)
    header = f"Matches for {query!r}:" if query.strip() else "Tasks:"
    return _format_listing(header, found, "(no matches)")


def cmd_clear(state: AppState, args: list[str]) -> str:
    return format_result(state.controller.clear_completed())


def cmd_show(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /show <id>"
    task = state.controller.task_details(task_id)
    if task is None:
        return format_result(Error("task not found"))
    created = task.created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return (
        f"Task {task.id}:\n"
        f"  Title: {task.title}\n"
        f"  Description: {task.description or '(none)'}\n"
        f"  Status: {'completed' if task.completed else 'pending'}\n"
        f"  Created: {created}{' (today)' if task.is_from_today() else ''}"
    )


def cmd_stats(state: AppState, args: list[str]) -> str:
    return state.controller.stats_line()


def cmd_exit(state: AppState, args: list[str]) -> str:
    # The console loop intercepts /exit before dispatch; other front-ends just get a hint.
    return "Use /exit at the console prompt to end the session."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List tasks: /list [all|done|pending].", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title> [| description].")
registry.register("done", cmd_done, help_text="Toggle completed: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del", "delete"])
registry.register("undo", cmd_undo, help_text="Add the last deleted task back (gets a new id).")
registry.register("find", cmd_find, help_text="Search title and description: /find <text>.")
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("show", cmd_show, help_text="Show task details: /show <id>.")
registry.register("stats", cmd_stats, help_text="Show total/completed/pending counts.")
registry.register("exit", cmd_exit, help_text="End the session (tasks are not kept).", aliases=["quit"])
