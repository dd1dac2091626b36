# src/tasktime/cli/main.py

"""
CLI entrypoint.

One invocation = one command:
parse arguments -> configure logging -> load the selected store ->
run the handler -> print the reply -> save the store back.

Argument errors (bad id, unknown task type) abort before any file is read.
Business errors are printed and the store is still saved. Store I/O errors
exit with status 1 and nothing is written.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import click

from .. import __version__
from ..config import Settings, get_settings
from ..core.duration import TOKEN_HELP
from ..core.errors import InvalidFormatError, StoreIOError, TaskError
from ..core.state import AppState
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_models import TaskCategory
from . import commands
from .bootstrap import create_initial_state, save_state

logger = logging.getLogger(__name__)


class CategoryType(click.ParamType):
    name = "tasktype"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> TaskCategory:
        if isinstance(value, TaskCategory):
            return value
        try:
            return TaskCategory.parse(value)
        except InvalidFormatError as e:
            self.fail(str(e), param, ctx)


CATEGORY = CategoryType()
TASK_ID = click.IntRange(min=0)


@dataclass(frozen=True, slots=True)
class CliContext:
    settings: Settings
    category: TaskCategory


def _fatal(e: StoreIOError) -> click.ClickException:
    logger.debug("Store failure", exc_info=e)
    return click.ClickException(str(e))


def _run(ctx: click.Context, handler: Callable[..., str], *args: Any, **kwargs: Any) -> None:
    cli_ctx: CliContext = ctx.obj
    try:
        state: AppState = create_initial_state(settings=cli_ctx.settings, category=cli_ctx.category)
    except StoreIOError as e:
        raise _fatal(e) from e

    try:
        reply = handler(state, *args, **kwargs)
    except TaskError as e:
        logger.info("%s rejected: %s", handler.__name__, e)
        reply = str(e)
    except StoreIOError as e:
        raise _fatal(e) from e

    click.echo(reply)

    try:
        save_state(state)
    except StoreIOError as e:
        raise _fatal(e) from e


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-t",
    "--tasktype",
    "category",
    type=CATEGORY,
    default=None,
    help="Type of tasks you want to work on (current, archive).",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the task files (overrides TASKTIME_DATA_DIR).",
)
@click.version_option(__version__, prog_name="tasktime")
@click.pass_context
def cli(ctx: click.Context, category: TaskCategory | None, data_dir: Path | None) -> None:
    """Track time spent on named tasks."""
    try:
        settings = get_settings()
    except InvalidFormatError as e:
        raise click.UsageError(str(e), ctx) from e

    if data_dir is not None:
        settings = replace(settings, data_dir=data_dir)

    log_file = setup_logging(
        log_dir=settings.log_dir,
        console_level=level_from_name(settings.log_level),
        log_to_file=settings.log_to_file,
    )
    logger.debug("Starting %s %s (log=%s)", settings.app_name, ctx.invoked_subcommand, log_file)

    ctx.obj = CliContext(settings=settings, category=category or settings.default_category)


@cli.command("list")
@click.option("-a", "--all", "show_all", is_flag=True, help="List all tasks, not only running ones.")
@click.option("-T", "--timestamp", "show_timestamp", is_flag=True, help="Show when each task was last started.")
@click.option("-b", "--base", "show_base", is_flag=True, help="Show the committed time without the running part.")
@click.pass_context
def list_cmd(ctx: click.Context, show_all: bool, show_timestamp: bool, show_base: bool) -> None:
    """List running tasks (or all of them) with their current time."""
    _run(ctx, commands.cmd_list, show_all=show_all, show_timestamp=show_timestamp, show_base=show_base)


@cli.command("create")
@click.argument("name")
@click.option("-s", "--start", is_flag=True, help="Start the timer after creating the task.")
@click.pass_context
def create_cmd(ctx: click.Context, name: str, start: bool) -> None:
    """Create a new task."""
    _run(ctx, commands.cmd_create, name, start=start)


@cli.command("delete")
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def delete_cmd(ctx: click.Context, task_id: int) -> None:
    """Delete a task by id."""
    _run(ctx, commands.cmd_delete, task_id)


@cli.command("delete-name")
@click.argument("name")
@click.pass_context
def delete_name_cmd(ctx: click.Context, name: str) -> None:
    """Delete the only task with the given name."""
    _run(ctx, commands.cmd_delete_by_name, name)


@cli.command("start")
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def start_cmd(ctx: click.Context, task_id: int) -> None:
    """Start running a task timer."""
    _run(ctx, commands.cmd_start, task_id)


@cli.command("stop")
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def stop_cmd(ctx: click.Context, task_id: int) -> None:
    """Stop a task timer and keep the elapsed time."""
    _run(ctx, commands.cmd_stop, task_id)


@cli.command("cancel")
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def cancel_cmd(ctx: click.Context, task_id: int) -> None:
    """Stop a task timer and drop the time since it was started."""
    _run(ctx, commands.cmd_cancel, task_id)


@cli.command("rename")
@click.argument("task_id", type=TASK_ID)
@click.argument("name")
@click.pass_context
def rename_cmd(ctx: click.Context, task_id: int, name: str) -> None:
    """Rename a task."""
    _run(ctx, commands.cmd_rename, task_id, name)


@cli.command("add", epilog=TOKEN_HELP)
@click.argument("task_id", type=TASK_ID)
@click.argument("time", metavar="TIME")
@click.pass_context
def add_cmd(ctx: click.Context, task_id: int, time: str) -> None:
    """Add time to a task. TIME: XXhYYm, e.g. 1h30m."""
    _run(ctx, commands.cmd_add, task_id, time)


@cli.command("sub", epilog=TOKEN_HELP)
@click.argument("task_id", type=TASK_ID)
@click.argument("time", metavar="TIME")
@click.pass_context
def sub_cmd(ctx: click.Context, task_id: int, time: str) -> None:
    """Subtract time from a task. TIME: XXhYYm, e.g. 1h30m."""
    _run(ctx, commands.cmd_sub, task_id, time)


@cli.command("set", epilog=TOKEN_HELP)
@click.argument("task_id", type=TASK_ID)
@click.argument("time", metavar="TIME")
@click.pass_context
def set_cmd(ctx: click.Context, task_id: int, time: str) -> None:
    """Set the total time of a stopped task. TIME: XXhYYm, e.g. 1h30m."""
    _run(ctx, commands.cmd_set, task_id, time)


@cli.command("archive")
@click.argument("task_id", type=TASK_ID)
@click.pass_context
def archive_cmd(ctx: click.Context, task_id: int) -> None:
    """Move a stopped task to the archive file."""
    _run(ctx, commands.cmd_archive, task_id)


@cli.command("clear")
@click.pass_context
def clear_cmd(ctx: click.Context) -> None:
    """Delete every task of the selected task type (asks first)."""
    _run(ctx, commands.cmd_clear)


def main() -> None:
    cli(prog_name="tasktime")


if __name__ == "__main__":
    main()
