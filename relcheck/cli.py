import re
from contextlib import contextmanager
from logging import basicConfig, getLogger
from pathlib import Path
from typing import Optional

import click
from click_help_colors import HelpColorsGroup
from rich import print as rprint
from rich.box import SIMPLE_HEAVY
from rich.logging import RichHandler
from rich.table import Column, Table

from relcheck import __version__
from relcheck.constants import CONFIG_PATH
from relcheck.exceptions import ConfigError, ReleaseCheckError
from relcheck.releases import fetch_latest_tag
from relcheck.settings import Settings
from relcheck.updates import UpdateCheck, check_for_update
from relcheck.versions import compare_versions

CODE_BLOCK = re.compile(r'```\n\s*(.+?)```\n', re.DOTALL)
CODE_INLINE = re.compile(r'`([^`]+?)`')
HEADER = re.compile(r'^\s*#+\s*(.*)$', re.MULTILINE)

timeout_option = click.option(
    '-t',
    '--timeout',
    type=click.FloatRange(min=0, min_open=True),
    help='Request timeout in seconds (default: from settings)',
)


@click.group(
    cls=HelpColorsGroup,
    invoke_without_command=True,
    help_headers_color='blue',
    help_options_color='cyan',
)
@click.pass_context
@click.option('-v', '--verbose', count=True, help='Show verbose output (up to 3 times)')
@click.option('--version', is_flag=True, help='Show version')
@click.option(
    '-c',
    '--config',
    type=click.Path(dir_okay=False, path_type=Path),
    help=f'Alternate settings file (default: {CONFIG_PATH})',
)
def main(ctx, verbose, version, config):
    """Check GitHub projects for newer releases"""
    try:
        ctx.obj = settings = Settings.read(config or CONFIG_PATH)
    except ConfigError as e:
        raise click.BadParameter(str(e), ctx=ctx, param_hint='--config') from e
    ctx.meta['verbose'] = verbose
    if verbose == 0:
        enable_logging(level=settings.log_level, external_level=settings.log_level_external)
    if verbose == 1:
        enable_logging(level='INFO', external_level='WARNING')
    elif verbose == 2:
        enable_logging(level='DEBUG', external_level='INFO')
    elif verbose >= 3:
        enable_logging(level='DEBUG', external_level='DEBUG')

    if version:
        click.echo(f'relcheck v{__version__}')
        click.echo(f'Settings file: {settings.path}')
        ctx.exit()
    elif not ctx.invoked_subcommand:
        click.echo(ctx.get_help())


@main.command()
@click.pass_obj
@timeout_option
@click.argument('owner')
@click.argument('repo')
def latest(settings: Settings, owner, repo, timeout):
    """Show the tag of a project's latest release.

    \b
    ### Example
    ```
    relcheck latest pyinat naturtag
    ```
    """
    with _handle_errors():
        tag = fetch_latest_tag(
            owner,
            repo,
            timeout=timeout or settings.timeout,
            api_url=settings.api_url,
            user_agent=settings.user_agent,
        )
    click.echo(tag)


@main.command()
@click.argument('installed')
@click.argument('latest')
def compare(installed, latest):
    """Compare two semantic versions.

    Prints `-1` if INSTALLED is older than LATEST, `0` if they are equal, and `1` if INSTALLED is
    newer. A leading `v` is optional, and build metadata is ignored.

    \b
    ### Example
    ```
    relcheck compare v1.2.3 v1.3.0
    ```
    """
    with _handle_errors():
        ordering = compare_versions(installed, latest)
    click.echo(str(ordering))


@main.command()
@click.pass_context
@timeout_option
@click.argument('owner')
@click.argument('repo')
@click.argument('installed')
def check(ctx, owner, repo, installed, timeout):
    """Check if a newer release of a project is available.

    Exits with status 1 if an update is available, or 0 if INSTALLED is up to date.

    \b
    ### Example
    ```
    relcheck check pyinat naturtag v0.7.0
    ```
    """
    with _handle_errors():
        result = check_for_update(owner, repo, installed, timeout=timeout, settings=ctx.obj)
    rprint(format_update_check(result))
    if result.update_available:
        rprint(f'Release: {result.release_url}')
        ctx.exit(1)


@main.command(name='config')
@click.pass_obj
def show_config(settings: Settings):
    """Show current settings"""
    table = Table(Column('Setting', style='bold white'), 'Value', box=SIMPLE_HEAVY)
    for name, value in [
        ('path', settings.path),
        ('timeout', settings.timeout),
        ('api_url', settings.api_url),
        ('user_agent', settings.user_agent),
        ('log_level', settings.log_level),
        ('log_level_external', settings.log_level_external),
    ]:
        table.add_row(name, str(value))
    rprint(table)


@contextmanager
def _handle_errors():
    """Report library errors in red and exit with the matching status code"""
    try:
        yield
    except ReleaseCheckError as e:
        click.secho(f'Error: {e}', fg='red', err=True)
        raise click.exceptions.Exit(e.exit_code) from e


def format_update_check(result: UpdateCheck) -> Table:
    """Format an update check into a table"""
    table = Table(
        Column('Project', style='bold white'),
        'Installed',
        'Latest',
        'Status',
        box=SIMPLE_HEAVY,
        header_style='bold cyan',
    )
    if result.update_available:
        status = '[yellow]Update available[/yellow]'
    elif result.ordering == 0:
        status = '[green]Up to date[/green]'
    else:
        status = '[green]Ahead of latest[/green]'
    table.add_row(f'{result.owner}/{result.repo}', result.installed, result.latest, status)
    return table


def enable_logging(level: str = 'INFO', external_level: str = 'WARNING'):
    """Configure logging to standard output with prettier tracebacks, formatting, and terminal
    colors (if supported).

    Args:
        level: Logging level to use for relcheck
        external_level: Logging level to use for other libraries
    """
    basicConfig(
        format='%(message)s',
        datefmt='[%m-%d %H:%M:%S]',
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
        level=external_level,
    )
    getLogger('relcheck').setLevel(level)
    getLogger('urllib3').setLevel(external_level)
    getLogger('requests').setLevel(external_level)


def colorize_help_text(text: Optional[str]) -> Optional[str]:
    """Colorize code blocks and headers in CLI help text"""
    if not text:
        return text
    text = re.sub(r'^    ', '', text, flags=re.MULTILINE)
    text = HEADER.sub(click.style(r'\1:', 'blue', bold=True), text)
    text = CODE_BLOCK.sub(click.style(r'\1', 'cyan'), text)
    text = CODE_INLINE.sub(click.style(r'\1', 'cyan'), text)
    return text


for cmd in [latest, compare, check]:
    cmd.help = colorize_help_text(cmd.help)
