"""Monoscan command line interface.

Commands:
- scan: Report component classes and lifecycle methods in files
- base-class: Show the base class enclosing a line
- methods: List void methods declared in a file
- missing: List lifecycle methods a component does not implement
- catalog: List the lifecycle catalog
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import click

from monoscan import __version__
from monoscan.config import ScannerConfig
from monoscan.services.analysis_service import AnalysisService, FileReport
from monoscan.types.errors import MonoscanError
from monoscan.utils.logger import configure_logging, logger


def _config(ctx: click.Context) -> ScannerConfig:
    """Environment settings, with --catalog taking precedence."""
    obj = ctx.ensure_object(dict)
    if "config" not in obj:
        try:
            config = ScannerConfig.from_env()
            if obj.get("catalog"):
                config = replace(config, catalog_path=obj["catalog"])
            obj["config"] = config
        except MonoscanError as e:
            raise click.ClickException(e.get_formatted_message()) from e
    return obj["config"]


def _service(ctx: click.Context) -> AnalysisService:
    """Build the analysis service lazily from the group options."""
    obj = ctx.ensure_object(dict)
    if "service" not in obj:
        try:
            obj["service"] = AnalysisService.from_config(_config(ctx))
        except MonoscanError as e:
            raise click.ClickException(e.get_formatted_message()) from e
    return obj["service"]


def _read(service: AnalysisService, path: str) -> list[str]:
    try:
        return service.read_lines(path)
    except MonoscanError as e:
        raise click.ClickException(e.get_formatted_message()) from e


def _print_report(report: FileReport) -> None:
    click.echo(f"{report.file_path}:")
    if not report.has_component:
        click.echo("  no MonoBehaviour/NetworkBehaviour class")
        return

    click.echo(f"  component class at line {report.component_header + 1}")
    if report.body is None:
        click.echo("  class body is not closed")
        return

    if report.base_class is None:
        base = "(unknown)"
    else:
        base = report.base_class or "(no base class)"
    click.echo(f"  base class: {base}")
    click.echo(f"  body: lines {report.body.start + 1}-{report.body.end + 1} ({report.body.line_count} lines)")
    click.echo(f"  methods: {', '.join(report.method_names) or '(none)'}")
    click.echo(f"  lifecycle: {', '.join(report.lifecycle_methods) or '(none)'}")


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="Monoscan", message="%(prog)s v%(version)s")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False),
    default=None,
    help="Lifecycle catalog JSON file (defaults to the bundled Unity catalog).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, catalog: str | None) -> None:
    """Monoscan - Heuristic scanner for MonoBehaviour and NetworkBehaviour classes."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["catalog"] = catalog

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Output reports as JSON.")
@click.pass_context
def scan(ctx: click.Context, path: str, as_json: bool) -> None:
    """Scan a file or directory for component classes."""
    service = _service(ctx)

    if Path(path).is_dir():
        reports = service.analyze_tree(path)
        logger.debug(f"Scanned {len(reports)} files under {path}")
    else:
        reports = [service.analyze(_read(service, path), file_path=path)]

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in reports], indent=2))
        return

    if not reports:
        click.echo("No source files found.")
        return
    for report in reports:
        _print_report(report)


@cli.command("base-class")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("line", type=click.IntRange(min=1))
@click.pass_context
def base_class(ctx: click.Context, path: str, line: int) -> None:
    """Show the base class of the class enclosing LINE (1-based)."""
    service = _service(ctx)
    lines = _read(service, path)

    base = service.scanner.get_enclosing_base_class(lines, line - 1)
    if base is None:
        click.echo("(not inside a class)")
    elif base == "":
        click.echo("(no base class)")
    else:
        click.echo(base)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--lifecycle-only", is_flag=True, help="Only list lifecycle methods.")
@click.pass_context
def methods(ctx: click.Context, path: str, lifecycle_only: bool) -> None:
    """List void methods declared in a file."""
    service = _service(ctx)
    scanner = service.scanner
    lines = _read(service, path)

    for index, text in enumerate(lines):
        if lifecycle_only:
            name = scanner.find_lifecycle_method_name(text)
        else:
            name = scanner.find_method_name(text)
        if name is not None:
            click.echo(f"{index + 1}: {name}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--line",
    type=click.IntRange(min=1),
    default=None,
    help="Only suggest methods insertable at this line (1-based).",
)
@click.pass_context
def missing(ctx: click.Context, path: str, line: int | None) -> None:
    """List lifecycle methods the component class does not implement."""
    service = _service(ctx)
    lines = _read(service, path)

    if line is not None:
        names = service.suggest_messages(lines, line - 1)
    else:
        report = service.analyze(lines, file_path=path)
        if report.body is None:
            raise click.ClickException(f"No complete MonoBehaviour/NetworkBehaviour class in {path}")
        names = report.missing_lifecycle_methods

    for name in names:
        click.echo(name)


@cli.command()
@click.option("--signatures", is_flag=True, help="Show C# declaration stubs.")
@click.option("--json", "as_json", is_flag=True, help="Output the catalog as JSON.")
@click.pass_context
def catalog(ctx: click.Context, signatures: bool, as_json: bool) -> None:
    """List the lifecycle catalog."""
    try:
        messages = _config(ctx).load_catalog()
    except MonoscanError as e:
        raise click.ClickException(e.get_formatted_message()) from e

    if as_json:
        click.echo(json.dumps([m.to_dict() for m in messages], indent=2))
        return

    for message in messages:
        click.echo(message.signature if signatures else message.name)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
