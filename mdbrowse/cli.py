import os
import sys
from typing import Optional, Tuple

import click
from rich.console import Console

from .config import DEFAULT_NOTICE_DELAY, DEFAULT_PADDING, Settings
from .debug import configure_logging, get_logger
from .tui import MarkdownBrowserApp


@click.command()
@click.argument(
    'directory',
    required=False,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
)
@click.option(
    '--ext',
    'exts',
    multiple=True,
    help="File extension that may be opened (repeat for several). Defaults to .md.",
)
@click.option(
    '--notice-delay',
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_NOTICE_DELAY,
    envvar='MDBROWSE_NOTICE_DELAY',
    show_default=True,
    help="Seconds an error notice stays on screen.",
)
@click.option(
    '--padding',
    type=click.IntRange(min=0),
    default=DEFAULT_PADDING,
    show_default=True,
    help="Padding around the content panel, in cells.",
)
@click.option(
    '--show-hidden',
    is_flag=True,
    default=False,
    help="List dot-files and dot-directories.",
)
@click.option(
    '--debug',
    is_flag=True,
    default=False,
    envvar='MDBROWSE_DEBUG',
    help='Enable verbose debug logging to mdbrowse_debug.log',
    show_default=True,
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False),
    envvar='MDBROWSE_LOG',
    help="Write the log to this file instead of mdbrowse_debug.log.",
)
@click.option(
    '--debug-keys',
    is_flag=True,
    default=False,
    envvar='MDBROWSE_DEBUG_KEYS',
    hidden=True,
    help="Also log every dispatched event.",
)
def main(
    directory: Optional[str],
    exts: Tuple[str, ...],
    notice_delay: float,
    padding: int,
    show_hidden: bool,
    debug: bool,
    log_file: Optional[str],
    debug_keys: bool,
) -> None:
    """
    Browse DIRECTORY (default: the current directory) and read markdown files.
    """
    console = Console(stderr=True)
    log_path = configure_logging(debug=debug or debug_keys, log_path=log_file)
    if log_path:
        console.print(f'[dim]Logging to {log_path}[/dim]')
    log = get_logger("main")

    if directory is None:
        try:
            directory = os.getcwd()
        except OSError as e:
            log.error("cannot resolve working directory: %s", e)
            console.print(f"[bold red]Error:[/bold red] cannot resolve working directory: {e}")
            sys.exit(1)

    settings_kwargs = dict(
        start_dir=directory,
        notice_delay=notice_delay,
        padding=padding,
        show_hidden=show_hidden,
        debug_keys=debug_keys,
    )
    if exts:
        settings_kwargs["allowed_exts"] = exts
    try:
        settings = Settings(**settings_kwargs)
    except ValueError as e:
        raise click.UsageError(str(e))
    log.debug(
        "start: dir=%s exts=%s notice_delay=%s padding=%s show_hidden=%s",
        settings.start_dir,
        settings.allowed_exts,
        settings.notice_delay,
        settings.padding,
        settings.show_hidden,
    )

    try:
        app = MarkdownBrowserApp(settings)
        app.run()
    except Exception as e:
        log.exception("terminal driver failed: %s", e)
        console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        sys.exit(1)

    return_code = app.return_code or 0
    log.debug("exit: return_code=%s", return_code)
    if return_code:
        sys.exit(return_code)


if __name__ == "__main__":
    main()
