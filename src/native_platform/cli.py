"""Native Platform CLI - Main entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler
from rich.table import Table

from native_platform import __version__
from native_platform.config import (
    DEFAULT_CONFIG_TEMPLATE,
    Config,
    get_config_paths,
    load_config,
    load_config_from_file,
)
from native_platform.errors import UnrecognizedPlatformError
from native_platform.naming import executable_filename, library_filename
from native_platform.platform.detect import (
    PlatformInfo,
    RawHostInfo,
    classify_os,
    filename_conventions,
    resolve_platform,
)
from native_platform.ui.console import create_console, print_error, print_header, print_warning

app = typer.Typer(
    name="native-platform",
    help="Show the platform identifier and native filename conventions for a host.",
    no_args_is_help=True,
)
console = create_console()


class State:
    """Global state container for CLI."""

    def __init__(self) -> None:
        self.config: Config = Config()  # Default until loaded


state = State()


def _setup_logging(verbose: bool) -> None:
    """Route library logging through Rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _print_conventions_table(raw: RawHostInfo, info: PlatformInfo | None) -> None:
    """Print raw input, classification and derived values as a table."""
    table = Table(title="Platform", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")

    lib_prefix, lib_suffix, exe_suffix = filename_conventions(raw.os_name)

    table.add_row("os_name", repr(raw.os_name))
    table.add_row("os_arch", repr(raw.os_arch))
    table.add_row("family", classify_os(raw.os_name).name)
    table.add_row("PLATFORM", info.platform if info else "[red]unrecognized[/red]")
    table.add_row("LIB_PREFIX", repr(lib_prefix))
    table.add_row("LIB_SUFFIX", repr(lib_suffix))
    table.add_row("EXE_SUFFIX", repr(exe_suffix))

    if info is not None:
        table.add_row("library", library_filename("example", info))
        table.add_row("executable", executable_filename("example", info))

    console.print(table)


def _resolve_and_print(raw: RawHostInfo) -> None:
    """Resolve raw, print the table, exit 1 if the OS is unrecognized."""
    try:
        info: PlatformInfo | None = resolve_platform(raw)
    except UnrecognizedPlatformError as e:
        _print_conventions_table(raw, None)
        print_error(console, str(e))
        raise typer.Exit(1) from e

    _print_conventions_table(raw, info)


def _file_status(path: Path) -> str:
    return "[green]exists[/green]" if path.exists() else "[dim]not found[/dim]"


@app.command()
def info() -> None:
    """Show the platform identifier and filename conventions of this host."""
    print_header(console, "Host platform")

    host = state.config.host
    if host.os_name or host.os_arch:
        print_warning(console, "Using host overrides from configuration")

    _resolve_and_print(RawHostInfo.from_host(host))


@app.command()
def classify(
    os_name: str = typer.Option(
        ...,
        "--os-name",
        "-n",
        help='OS name as a host would report it, e.g. "Windows 10"',
    ),
    os_arch: str = typer.Option(
        ...,
        "--os-arch",
        "-a",
        help='Architecture as a host would report it, e.g. "amd64"',
    ),
) -> None:
    """Classify an arbitrary OS name / architecture pair."""
    _resolve_and_print(RawHostInfo(os_name=os_name, os_arch=os_arch))


config_app = typer.Typer(
    name="config",
    help="Manage the host override file.",
    no_args_is_help=True,
)
app.add_typer(config_app)


@config_app.command("init")
def config_init(
    global_config: bool = typer.Option(
        True,
        "--global/--local",
        help="Write to the XDG config dir (--global) or ./nativeplatform.toml (--local)",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Replace an existing file"),
) -> None:
    """Write a commented host-override template."""
    xdg_path, cwd_path = get_config_paths()
    target = xdg_path if global_config else cwd_path

    if target.exists() and not force:
        print_warning(console, f"{target} already exists (use --force to replace it)")
        raise typer.Exit(1)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(DEFAULT_CONFIG_TEMPLATE)
    except OSError as e:
        print_error(console, f"Cannot write {target}: {e}")
        raise typer.Exit(1) from e

    console.print(f"[green]Wrote[/green] {target}")


@config_app.command("show")
def config_show() -> None:
    """Show the effective host overrides and where they were read from."""
    config = state.config
    xdg_path, cwd_path = get_config_paths()

    table = Table(title="Host overrides", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("os_name", repr(config.host.os_name))
    table.add_row("os_arch", repr(config.host.os_arch))
    table.add_row("source", str(config._source) if config._source else "[dim]defaults only[/dim]")
    table.add_row("global file", f"{xdg_path} ({_file_status(xdg_path)})")
    table.add_row("local file", f"{cwd_path} ({_file_status(cwd_path)})")
    console.print(table)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"native-platform v{__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (overrides default locations)",
        exists=True,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log classification details",
    ),
) -> None:
    """Native Platform - platform identifiers for native libraries."""
    _setup_logging(verbose)

    try:
        if config_file:
            state.config = load_config_from_file(config_file)
        else:
            state.config = load_config()
    except ValueError as e:
        print_error(console, f"Config error: {e}")
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
