"""CLI interface for structval using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from structval import __description__, __version__
from structval.atoms import default_registry
from structval.config import LogLevel, ReportFormat, load_config
from structval.messages import Printer
from structval.validation import ValidationResult, Validator, parse_rule

app = typer.Typer(
    name="structval",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logging.getLogger("structval").setLevel(_LOG_LEVELS.get(level, logging.WARNING))


def _print_json(data: Any) -> None:
    console.print(
        jsonlib.dumps(data, indent=2, ensure_ascii=False),
        markup=False, highlight=False, soft_wrap=True
    )


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"structval version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """structval - structural validation for nested values."""
    _setup_logging(LogLevel.WARN.value)


def _load_rules(rules_file: Optional[Path], inline_rules: Optional[List[str]]) -> dict[str, str]:
    """Collect rule table entries from a JSON file and PATTERN=EXPRESSION options."""
    table: dict[str, str] = {}
    if rules_file is not None:
        with open(rules_file, encoding="utf-8") as f:
            data = jsonlib.load(f)
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise ValueError(f"Rules file {rules_file} must map path patterns to constraint expressions")
        table.update(data)

    for entry in inline_rules or []:
        pattern, sep, expression = entry.partition("=")
        if not sep:
            raise ValueError(f"Invalid --rule '{entry}'. Expected PATTERN=EXPRESSION")
        table[pattern] = expression
    return table


def _output_result(result: ValidationResult, format: str) -> None:
    if format == ReportFormat.JSON.value:
        _print_json(result.to_dict())
        return

    if format == ReportFormat.MARKDOWN.value:
        console.print("# Validation Report", markup=False)
        console.print(f"**Status:** {result.status.value}", markup=False)
        console.print(f"**Exit Code:** {result.exit_code}", markup=False)
        console.print()
        if result.errors:
            console.print("## Violations", markup=False)
            for error in result.errors:
                console.print(f"- {error}", markup=False)
        return

    status_color = "green" if result.ok else "red"
    console.print(f"[{status_color}]Validation Status: {result.status.value.upper()}[/{status_color}]")

    if result.counters:
        counter_table = Table()
        counter_table.add_column("Metric", style="cyan")
        counter_table.add_column("Count", style="white", justify="right")
        for key, value in sorted(result.counters.items()):
            counter_table.add_row(key.replace("_", " ").title(), str(value))
        console.print(counter_table)

    if result.errors:
        console.print("\n[blue]Violations:[/blue]")
        errors_table = Table()
        errors_table.add_column("Fields", style="cyan")
        errors_table.add_column("Message", style="white")
        for error in result.errors:
            errors_table.add_row(escape(", ".join(error.fields)), escape(error.message))
        console.print(errors_table)
    else:
        console.print("\n[green]No violations found![/green]")


@app.command()
def validate(
    data: Annotated[
        Path,
        typer.Argument(help="JSON document to validate")
    ],
    rules: Annotated[
        Optional[Path],
        typer.Option("--rules", "-r", help="JSON file mapping path patterns to constraint expressions")
    ] = None,
    rule: Annotated[
        Optional[List[str]],
        typer.Option("--rule", help="Extra rule as PATTERN=EXPRESSION, e.g. '.*.email=is:email' (repeatable)")
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: from config)")
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Message locale, e.g. en, zh (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .structval.json)")
    ] = None,
) -> None:
    """Validate a JSON document against a rule table."""
    valid_formats = [f.value for f in ReportFormat]
    if format is not None and format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        structval_config = load_config(config)
        _setup_logging(structval_config.logging.level)

        with open(data, encoding="utf-8") as f:
            document = jsonlib.load(f)
        overlay = _load_rules(rules, rule)

        printer = Printer(locale or structval_config.validation.locale)
        validator = Validator.from_config(structval_config, printer=printer)
        result = validator.validate(document, overlay)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _output_result(result, format or structval_config.output.format)
    raise typer.Exit(result.exit_code)


@app.command()
def parse(
    expression: Annotated[
        str,
        typer.Argument(help="Constraint expression, e.g. 'must:id;omitempty;min:1'")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
) -> None:
    """Parse a constraint expression and show the resulting rule."""
    if format not in ("table", "json"):
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: table, json")
        raise typer.Exit(1)

    parsed = parse_rule(expression)
    fields = {
        "formats": parsed.formats,
        "must": parsed.must,
        "enum": parsed.enum,
        "min": parsed.min,
        "max": parsed.max,
        "pattern": parsed.pattern,
        "omitempty": parsed.omitempty,
    }

    if format == "json":
        _print_json({**fields, "canonical": parsed.to_grammar()})
        return

    table = Table(title="Rule")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    for key, value in fields.items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(key, escape("" if value is None else str(value)))
    console.print(table)
    console.print(f"Canonical: {escape(parsed.to_grammar())}")


@app.command()
def atoms(
    value: Annotated[
        Optional[str],
        typer.Argument(help="Show only the predicates that accept this value")
    ] = None,
) -> None:
    """List registered format predicates."""
    names = default_registry.names()
    if value is not None:
        names = [name for name in names if default_registry.get(name)(value)]
        if not names:
            console.print(f"[yellow]No predicate accepts[/yellow] {escape(value)}")
            raise typer.Exit(1)

    table = Table(title="Predicates")
    table.add_column("Name", style="cyan")
    for name in names:
        table.add_row(name)
    console.print(table)
