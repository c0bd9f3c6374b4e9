"""Command-line interface for Duke."""

import logging
import sys
from pathlib import Path

import click
from rich.markup import escape

from .app import Duke
from .config import get_config, load_config
from .errors import DukeError
from .storage import Storage
from .theme import get_themed_console
from .ui import Ui


def configure_logging(level_name: str, verbose: bool) -> None:
    """Send log records to stderr so they never mix with assistant replies."""
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              envvar="DUKE_CONFIG", help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path),
              help="Task file to use instead of the configured one")
@click.option("--command", "-c", "commands", multiple=True,
              help="Run this command line instead of starting a session (repeatable)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(package_name="duke-cli")
def main(config_path, data_file, commands, verbose):
    """Duke - a command-line task-tracking assistant.

    Examples:
      duke
      duke -c "todo read book" -c list
      duke -c "deadline submit report /by 2024-12-01"
    """
    try:
        config = load_config(config_path, strict=True) if config_path else get_config()
    except DukeError as e:
        get_themed_console().print(f"[error]Configuration error: {escape(e.message)}[/error]")
        sys.exit(1)

    configure_logging(config.log_level, verbose)

    storage = Storage(data_file or config.get_tasks_path())
    ui = Ui(get_themed_console(no_color=config.no_color), show_banner=config.show_banner)
    duke = Duke(storage, ui, find_ignore_case=config.find_ignore_case)

    if commands:
        duke.run_lines(commands)
    else:
        duke.run()


if __name__ == "__main__":
    main()
