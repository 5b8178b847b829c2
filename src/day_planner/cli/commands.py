# src/day_planner/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.datekeys import iso_day_key, parse_iso_day_key
from ..core.errors import PersistenceError, ValidationError
from ..core.state import AppState
from ..projection.day_detail import COMMANDS_HELP, open_day

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

EMPTY_GLYPH = "·"
WEEK = 7


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /day, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Rejected input (ValidationError / IndexError) becomes a one-line reply;
        a failed save is reported too, and the store has already rolled back.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except ValidationError as e:
            logger.info("/%s rejected: %s", name, e)
            return f"Rejected: {e}"
        except IndexError as e:
            logger.info("/%s out of range: %s", name, e)
            return f"Out of range: {e}"
        except PersistenceError as e:
            logger.exception("/%s could not be saved", name)
            return f"Not saved (storage error): {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _number(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ValidationError(f"{what} must be a number, got {raw!r}") from e


def _daily_id_at(state: AppState, raw: str) -> str:
    items = state.daily.list()
    n = _number(raw, "Item number")
    if not 1 <= n <= len(items):
        raise IndexError(f"No daily item #{n} ({len(items)} listed)")
    return items[n - 1].id


# ---- renderers ----


def render_daily(state: AppState) -> str:
    items = state.daily.list()
    if not items:
        return "Today: (empty)"
    lines = ["Today:"]
    for i, item in enumerate(items, start=1):
        box = "[x]" if item.done else "[ ]"
        emo = f" {item.emotion}" if item.emotion else ""
        lines.append(f"{i}. {box} {item.text}{emo}")
    return "\n".join(lines)


def render_month(state: AppState, year: int, month: int) -> str:
    cells = state.projector.project_month(year, month)
    lines = [f"{year:04d}-{month + 1:02d}"]
    for cell in cells:
        previews = "; ".join(
            f"{s.emotion} {s.text}" if s.emotion else s.text for s in cell.summaries
        )
        lines.append(f"{cell.day_number:2d} {previews}".rstrip())
    return "\n".join(lines)


def render_year(state: AppState, year: int) -> str:
    out: list[str] = []
    for block in state.projector.project_year(year):
        out.append(block.month_label)
        row: list[str] = []
        for cell in block.days:
            row.append(f"{cell.day_number:2d}:{cell.glyph or EMPTY_GLYPH}")
            if len(row) == WEEK:
                out.append("  ".join(row))
                row = []
        if row:
            out.append("  ".join(row))
    return "\n".join(out)


def render_birthdays(state: AppState) -> str:
    items = state.birthdays.list()
    if not items:
        return "Birthdays: (none)"
    lines = ["Birthdays:"]
    for b in items:
        lines.append(f"  {b.date} {b.name} {b.emotion or ''}".rstrip())
    return "\n".join(lines)


# ---- handlers ----


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_today(state: AppState, args: list[str]) -> str:
    return render_daily(state)


def cmd_todo(state: AppState, args: list[str]) -> str:
    item = state.daily.add(" ".join(args))
    return f"Added: {item.text}\n{render_daily(state)}"


def cmd_check(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /check <n>"
    state.daily.toggle(_daily_id_at(state, args[0]))
    return render_daily(state)


def cmd_drop(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /drop <n>"
    state.daily.remove(_daily_id_at(state, args[0]))
    return render_daily(state)


def cmd_mood(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return f"Usage: /mood <n> <emoji #>\n{state.palette.render()}"
    item_id = _daily_id_at(state, args[0])
    symbol = state.palette.pick(_number(args[1], "Emoji number")).symbol
    state.daily.set_emotion(item_id, symbol)
    return render_daily(state)


def cmd_month(state: AppState, args: list[str]) -> str:
    """
    /month           -> current month
    /month YYYY-MM   -> given month
    """
    if args:
        d = parse_iso_day_key(f"{args[0]}-01")
        year, month = d.year, d.month - 1
    else:
        today = state.clock()
        year, month = today.year, today.month - 1
    return render_month(state, year, month)


def cmd_year(state: AppState, args: list[str]) -> str:
    year = _number(args[0], "Year") if args else state.clock().year
    return render_year(state, year)


def cmd_day(state: AppState, args: list[str]) -> str:
    """
    /day YYYY-MM-DD                 -> numbered listing
    /day YYYY-MM-DD A text [|k]     -> add a task (optional emoji #k)
    /day YYYY-MM-DD M2 | D2 | E2 k  -> act on task #2 of the listing
    """
    if not args:
        return f"Usage: /day YYYY-MM-DD [command]\n{COMMANDS_HELP}"
    iso = iso_day_key(parse_iso_day_key(args[0]))
    session = open_day(state.projector, state.task_store, state.palette, iso)
    if len(args) == 1:
        return f"{session.render()}\n\n{COMMANDS_HELP}"

    command = args[1]
    argument = " ".join(args[2:]) or None
    if command.upper() == "C":
        return "Cancelled."
    session.execute(command, argument)
    return open_day(state.projector, state.task_store, state.palette, iso).render()


def cmd_add(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /add YYYY-MM-DD <text> [|emoji #]"
    iso = iso_day_key(parse_iso_day_key(args[0]))
    session = open_day(state.projector, state.task_store, state.palette, iso)
    session.execute("A", " ".join(args[1:]))
    return open_day(state.projector, state.task_store, state.palette, iso).render()


def cmd_days(state: AppState, args: list[str]) -> str:
    days = state.task_store.days()
    if not days:
        return "No tasks yet."
    return "\n".join(f"{d} ({len(state.task_store.list_tasks(d))})" for d in days)


def cmd_emoji(state: AppState, args: list[str]) -> str:
    """
    /emoji                      -> list palette
    /emoji add <name> <symbol>  -> append
    /emoji rm <n>               -> remove entry n
    """
    if not args:
        return state.palette.render() or "(palette is empty)"
    sub = args[0].lower()
    if sub == "add":
        if len(args) < 3:
            return "Usage: /emoji add <name> <symbol>"
        item = state.palette.add(" ".join(args[1:-1]), args[-1])
        return f"Added {item.symbol} {item.name}\n{state.palette.render()}"
    if sub in ("rm", "remove", "del"):
        if len(args) < 2:
            return "Usage: /emoji rm <n>"
        removed = state.palette.remove_at(_number(args[1], "Emoji number") - 1)
        return f"Removed {removed.symbol} {removed.name}\n{state.palette.render()}"
    return "Usage: /emoji | /emoji add <name> <symbol> | /emoji rm <n>"


def cmd_bday(state: AppState, args: list[str]) -> str:
    """
    /bday                              -> list birthdays
    /bday add MM-DD <name...> [#k]     -> add (optional emoji #k from the palette)
    """
    if not args:
        return render_birthdays(state)
    if args[0].lower() != "add" or len(args) < 3:
        return "Usage: /bday | /bday add MM-DD <name> [#emoji]"
    rest = args[2:]
    emotion = None
    if len(rest) > 1 and rest[-1].startswith("#"):
        emotion = state.palette.pick(_number(rest[-1][1:], "Emoji number")).symbol
        rest = rest[:-1]
    b = state.birthdays.add(" ".join(rest), args[1], emotion)
    return f"Birthday added: {b.date} {b.name} {b.emotion or ''}".rstrip()


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("today", cmd_today, help_text="Show today's to-do list.")
registry.register("todo", cmd_todo, help_text="Add a to-do: /todo <text>.")
registry.register("check", cmd_check, help_text="Mark/unmark to-do n: /check <n>.")
registry.register("drop", cmd_drop, help_text="Delete to-do n: /drop <n>.")
registry.register("mood", cmd_mood, help_text="Tag to-do n with emoji k: /mood <n> <k>.")
registry.register("month", cmd_month, help_text="Month view: /month [YYYY-MM].")
registry.register("year", cmd_year, help_text="Year icons: /year [YYYY].")
registry.register("day", cmd_day, help_text="Day detail: /day YYYY-MM-DD [A|M<n>|D<n>|E<n> k|C].")
registry.register("add", cmd_add, help_text="Add a task: /add YYYY-MM-DD <text> [|k].")
registry.register("days", cmd_days, help_text="List days that have tasks.")
registry.register("emoji", cmd_emoji, help_text="Palette: /emoji | /emoji add <name> <symbol> | /emoji rm <n>.")
registry.register("bday", cmd_bday, help_text="Birthdays: /bday | /bday add MM-DD <name> [#k].")
