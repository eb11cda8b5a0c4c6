# termhost_cli/main.py

import logging
from pathlib import Path
from typing import Optional

import typer

from termhost import TagKind, get_config
from termhost.attributes import COMMON_ATTRIBUTES, KIND_ATTRIBUTES
from termhost.events import EVENT_ATTRIBUTES
from termhost_cli.demo import run_demo

# The Typer app object that will be the entry point
app = typer.Typer(
    name="termhost",
    help="Tools for the termhost element-tree host layer.",
    add_completion=False
)


def _configure(config_file: Optional[Path], log_level: Optional[str]):
    config = get_config()
    if config_file is not None:
        if not config_file.exists():
            typer.echo(f"❌ Error: config file '{config_file}' does not exist.", err=True)
            raise typer.Exit(code=1)
        config.reload(str(config_file.resolve()))
    level = (log_level or config.get("log_level", "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")


@app.command()
def demo(
    steps: int = typer.Option(3, "--steps", "-n", min=0, help="How many times to bump the counter."),
    config_file: Optional[Path] = typer.Option(None, "--config", help="YAML file overriding the defaults."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ..."),
):
    """
    Mounts the counter demo, re-renders it STEPS times and prints the
    retained tree after each commit.
    """
    _configure(config_file, log_level)
    final = run_demo(steps, echo=typer.echo)
    typer.echo(f"\n✅ Unmounted after {steps} update(s); final count {final}.")


@app.command()
def tags():
    """Lists the element tags and the attributes each one accepts."""
    for kind in TagKind:
        typer.echo(f"{kind.value}")
        typer.echo(f"  common: {', '.join(COMMON_ATTRIBUTES)}")
        specific = KIND_ATTRIBUTES[kind]
        typer.echo(f"  {kind.value}: {', '.join(specific) if specific else '-'}")
        if kind is TagKind.INPUT:
            typer.echo(f"  events: {', '.join(EVENT_ATTRIBUTES)}")


if __name__ == "__main__":
    app()
