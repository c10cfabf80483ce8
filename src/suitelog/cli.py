
from typing import Optional
import pytest
import typer
from .config import load_config, AppConfig
from .errors import SuitelogError
from .listeners.listener import LoggerTestListener
from .listeners.replay import replay as replay_events
from .logging import setup_logging
from .plugin import SuitelogPlugin
from .reporters.console import ConsoleReporter

app = typer.Typer(add_completion=False, help="suitelog - log test run events and suite statistics")

def _listener(config: Optional[str], verbose: bool, debug: bool) -> LoggerTestListener:
    cfg: AppConfig = load_config(config)
    level = "DEBUG" if debug else ("INFO" if verbose else None)
    return LoggerTestListener(setup_logging(cfg, level))

@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also log test start/end"),
    debug: bool = typer.Option(False, "--debug", help="Log everything"),
    stats: bool = typer.Option(False, "--stats", help="Print per-suite statistics afterwards"),
):
    """Run pytest with the listener attached; extra arguments go to pytest."""
    listener = _listener(config, verbose, debug)
    code = pytest.main(list(ctx.args), plugins=[SuitelogPlugin(listener)])
    if stats: ConsoleReporter().emit(listener.get_stats())
    raise typer.Exit(code=int(code))

@app.command()
def replay(
    events: str = typer.Argument(..., help="JSON-lines file of recorded events"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also log test start/end"),
    debug: bool = typer.Option(False, "--debug", help="Log everything"),
    stats: bool = typer.Option(False, "--stats", help="Print per-suite statistics afterwards"),
):
    """Feed a recorded event stream through the listener."""
    listener = _listener(config, verbose, debug)
    try:
        with open(events, "rb") as fh:
            replay_events(listener, fh)
    except SuitelogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    if stats: ConsoleReporter().emit(listener.get_stats())
    ok = listener.summary is None or listener.summary.ok
    raise typer.Exit(code=0 if ok else 1)
