import logging
import os
from typing import List, Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cli.glossa.codebase.directory import Directory
from cli.glossa.config import CONFIG_FILE, load_config, read_config_dict, validate_config_dict
from cli.glossa.errors import ConfigError, GlossaError
from cli.glossa.glossary.formatted import LAYOUTS, ORDERS
from cli.glossa.report.destination import ConsoleDestination, FileDestination
from cli.glossa.report.printable import PrintableGlossary

VERSION = "0.1.0"

app = typer.Typer(
    help="glossa: generate a glossary from the classes marked @GlossaryTerm in a Python code base.",
    no_args_is_help=True,
)


def _version(value: bool):
    if value:
        Console().print(f"glossa v{VERSION}", style="bold cyan")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit", callback=_version, is_eager=True
    ),
):
    """Glossary generator for Python source trees."""


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _checked_config(path: Optional[str]) -> dict:
    if path is None:
        path = CONFIG_FILE
    elif not os.path.exists(path):
        raise ConfigError([f"{path} not found"])
    if os.path.exists(path):
        try:
            data = read_config_dict(path)
        except yaml.YAMLError as e:
            raise ConfigError([f"{path} is not valid YAML: {e}"]) from e
        errors = validate_config_dict(data)
        if errors:
            raise ConfigError(errors)
    return load_config(path)


def _choice(value: str, allowed, option: str) -> str:
    if value not in allowed:
        raise typer.BadParameter(f"expected one of {', '.join(allowed)}", param_hint=option)
    return value


@app.command("print")
def print_glossary(
    path: Optional[str] = typer.Argument(None, help="Root directory of the source code"),
    o: Optional[str] = typer.Option(None, "--output", "-o", help="Write the glossary to a file"),
    order: Optional[str] = typer.Option(None, "--order", help="Entry order: term or source"),
    layout: Optional[str] = typer.Option(None, "--layout", help="Layout: text or markdown"),
    marker: Optional[str] = typer.Option(None, "--marker", help="Decorator name marking terms"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Fail on glossary terms without docstring"
    ),
    recursive: Optional[bool] = typer.Option(
        None, "--recursive/--no-recursive", help="Scan sub directories"
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-x", help="Glob pattern of paths to skip (repeatable)"
    ),
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help=f"Configuration file (default {CONFIG_FILE}, optional)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Scan a source tree and print its glossary."""
    _setup_logging(verbose)
    console = Console()
    err = Console(stderr=True)
    try:
        cfg = _checked_config(config)
        overrides = {
            "source": path,
            "output": o,
            "order": order,
            "layout": layout,
            "marker": marker,
            "strict": strict,
            "recursive": recursive,
            "exclude": list(exclude) if exclude else None,
        }
        cfg.update({k: v for k, v in overrides.items() if v is not None})
        _choice(cfg["order"], ORDERS, "--order")
        _choice(cfg["layout"], LAYOUTS, "--layout")

        directory = Directory(cfg["source"], recursive=cfg["recursive"], exclude=cfg["exclude"])
        info = ConsoleDestination(console)
        target = FileDestination(cfg["output"]) if cfg["output"] else info
        PrintableGlossary(
            directory,
            info,
            target,
            marker=cfg["marker"],
            order=cfg["order"],
            layout=cfg["layout"],
            strict=cfg["strict"],
        ).print()
    except GlossaError as e:
        err.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)


@app.command("validate-config")
def validate_config(path: str = typer.Argument(CONFIG_FILE, help="Configuration file")):
    """Validate a configuration file."""
    console = Console()
    if not os.path.exists(path):
        console.print(f"[red]Error:[/red] {escape(path)} not found")
        raise typer.Exit(1)
    try:
        errors = validate_config_dict(read_config_dict(path))
    except yaml.YAMLError as e:
        errors = [f"not valid YAML: {e}"]
    if errors:
        for msg in errors:
            console.print(f"[red]✗[/red] {escape(msg)}", highlight=False)
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {escape(path)} is valid")


if __name__ == "__main__":
    app()
