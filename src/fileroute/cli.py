"""Command-line interface for fileroute."""
import json
import logging
import sys
from datetime import timedelta
from typing import List

import click

from .consumers import create_consumer
from .core.endpoint import resolve_endpoint
from .core.models import Config, GenericFile
from .core.options import OPTION_SCHEMA
from .errors import FileRouteError
from .utils.console import ConsoleManager, THEMES
from .utils.path_utils import PathUtils


def setup_logging(level: str, debug: bool) -> None:
    """Configure logging from the configured level or the debug flag."""
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.WARNING)
    format_string = '[%(levelname)s] %(name)s: %(message)s' if debug else '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=log_level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _option_rows(endpoint) -> List[List[str]]:
    values = endpoint.to_dict()
    rows = [
        ['uri', values['uri']],
        ['rootPath', values['root_path']],
        ['isAbsolute', str(values['is_absolute']).lower()],
    ]
    for name, spec in OPTION_SCHEMA.items():
        value = values[spec.field]
        if isinstance(value, bool):
            value = str(value).lower()
        elif value is None:
            value = '-'
        elif isinstance(spec.default, timedelta):
            value = f"{value}ms"
        rows.append([name, str(value)])
    return rows


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default='manhattan',
              help='Terminal color theme')
@click.option('--plain', is_flag=True, help='Disable colored output')
@click.version_option(package_name='fileroute')
@click.pass_context
def main(ctx: click.Context, debug: bool, theme: str, plain: bool) -> None:
    """
    Resolve file endpoint URIs and inspect the files beneath them.

    Examples:

        fileroute resolve "file:inbox/orders?recursive=true"

        fileroute relpath /data/inbox /data/inbox/2024/order.csv

        fileroute scan "file:///data/inbox?recursive=true&include=.*\\.csv"
    """
    config = Config()
    setup_logging(config.log_level, debug)
    ctx.obj = {
        'config': config,
        'console': ConsoleManager(theme=theme, force_plain=plain),
        'debug': debug,
    }


def _fail(ctx: click.Context, error: Exception) -> None:
    console: ConsoleManager = ctx.obj['console']
    console.print_error(str(error))
    if ctx.obj['debug']:
        console.print_exception()
    ctx.exit(1)


@main.command()
@click.argument('uri')
@click.option('--json', 'as_json', is_flag=True, help='Print the configuration as JSON')
@click.pass_context
def resolve(ctx: click.Context, uri: str, as_json: bool) -> None:
    """Resolve URI and print the endpoint configuration."""
    console: ConsoleManager = ctx.obj['console']
    try:
        endpoint = resolve_endpoint(uri, ctx.obj['config'])
    except FileRouteError as e:
        _fail(ctx, e)
        return

    if as_json:
        click.echo(json.dumps(endpoint.to_dict(), indent=2))
    else:
        console.print_table(['Option', 'Value'], _option_rows(endpoint), title='Endpoint')


@main.command()
@click.argument('root')
@click.argument('file_path')
@click.pass_context
def relpath(ctx: click.Context, root: str, file_path: str) -> None:
    """Print FILE_PATH relative to ROOT."""
    try:
        click.echo(PathUtils.relative_of(root, file_path))
    except FileRouteError as e:
        _fail(ctx, e)


@main.command()
@click.argument('uri')
@click.option('--progress/--no-progress', default=False, help='Show a progress bar while scanning')
@click.pass_context
def scan(ctx: click.Context, uri: str, progress: bool) -> None:
    """Poll URI once and list the relative path of every file found."""
    console: ConsoleManager = ctx.obj['console']
    found: List[GenericFile] = []

    try:
        consumer = create_consumer(uri, found.append, ctx.obj['config'], show_progress=progress)
        consumer.poll()
    except FileRouteError as e:
        _fail(ctx, e)
        return

    rows = [[item.relative_path, str(item.file_length or 0)] for item in found]
    console.print_table(['Relative path', 'Bytes'], rows,
                        caption=f"{len(found)} file(s) under {consumer.endpoint.root_path}")

    for error in consumer.errors:
        console.print_warning(error)


if __name__ == '__main__':
    main()
