from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="microunit", help="Run registered unit test cases")


def _resolve_run_settings(
    targets: list[str] | None,
    config: str | None,
) -> tuple[list[str], bool, str | None]:
    from microunit.config import load_config

    verbose = False
    debug_log = None
    resolved = list(targets or [])
    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            run_config = load_config(config_path)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
        if not resolved:
            resolved = run_config.targets
        verbose = run_config.verbose
        debug_log = run_config.debug_log

    if not resolved:
        typer.echo("Error: no test modules given (pass TARGET or --config)", err=True)
        raise typer.Exit(1)
    return resolved, verbose, debug_log


def _build(targets: list[str]):
    from microunit.errors import MicrounitError
    from microunit.loader import build_catalog

    try:
        return build_catalog(targets)
    except MicrounitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def run(
    targets: list[str] | None = typer.Argument(
        None, help="Test modules: dotted names or .py files"
    ),
    config: str | None = typer.Option(None, help="Path to microunit YAML config"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Append debug output to this file"
    ),
):
    """Run every registered test case and print a summary."""
    from microunit.driver import Driver
    from microunit.verbose import setup_logger

    resolved, config_verbose, config_debug_log = _resolve_run_settings(targets, config)
    log_path = debug_log or config_debug_log
    logger = setup_logger(
        Path(log_path) if log_path else None, verbose=verbose or config_verbose
    )
    catalog = _build(resolved)

    if not Driver(catalog, logger=logger).run():
        raise typer.Exit(1)


@app.command("list")
def list_cases(
    targets: list[str] | None = typer.Argument(
        None, help="Test modules: dotted names or .py files"
    ),
    config: str | None = typer.Option(None, help="Path to microunit YAML config"),
):
    """List registered test case names in run order."""
    resolved, _, _ = _resolve_run_settings(targets, config)
    catalog = _build(resolved)
    for name in catalog:
        typer.echo(name)


@app.command()
def init(
    dir: str = typer.Option(
        ".", "--dir", help="Directory to write the example test module into"
    ),
):
    """Write an example test module and config."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    config_file = project_dir / "microunit.yaml"
    if config_file.exists():
        typer.echo(f"microunit.yaml already exists in {dir}, skipping.")
        return

    config_file.write_text("""\
targets:
  - units.py
verbose: false
""")

    units_file = project_dir / "units.py"
    if not units_file.exists():
        units_file.write_text('''\
from microunit import assert_true, fail, unit


def double(n):
    return 2 * n


@unit
def test_two_plus_two():
    assert_true(2 + 2 == 4)


@unit
def test_double():
    for i in range(1000):
        if double(i) != 2 * i:
            return fail()
''')

    typer.echo(f"Initialized microunit project in {dir}:")
    typer.echo("  microunit.yaml  - run config")
    typer.echo("  units.py        - example test cases")
