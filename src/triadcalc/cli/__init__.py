"""
triadcalc CLI.

Reads one expression from the command line or an interactive prompt,
evaluates it, and prints either ``Solved: <value>`` or
``Error while solving: <message>``.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from triadcalc.cli.utils import configure_logging, get_version, version_callback
from triadcalc.core.config import load_config
from triadcalc.core.errors import CalcError, ConfigError, ErrorContext
from triadcalc.core.expression import (
    GroupToken,
    NumberToken,
    Token,
    evaluate_report,
    tokenize,
)

app = typer.Typer(
    help="Evaluate an arithmetic expression strictly left to right (2+3*4 is 20).",
    add_completion=False,
)

console = Console()


@app.command()
def solve_command(
    expression: str | None = typer.Argument(
        None,
        help="Expression to evaluate; prompts when omitted. Use -- before a leading minus.",
    ),
    show_tokens: bool = typer.Option(
        False, "--show-tokens", "-t", help="Print the token tree before solving"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    fail_on_error: bool = typer.Option(
        False, "--fail-on-error", help="Exit with code 1 when the expression cannot be solved"
    ),
    max_depth: int | None = typer.Option(
        None, "--max-depth", help="Maximum parenthesis nesting depth"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a triadcalc.toml file"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Evaluate EXPRESSION and print the result."""
    try:
        config = load_config(config_path).with_overrides(max_depth=max_depth, log_level=log_level)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=2)

    configure_logging(config.log_level)

    raw = (expression or "").strip()
    while not raw:
        raw = typer.prompt("Enter the equation").strip()

    if not json_output:
        typer.echo(f"You entered: {raw}")

    if show_tokens:
        try:
            console.print(_token_tree(raw, tokenize(raw, max_depth=config.max_depth)))
        except CalcError as e:
            console.print(Text(f"Cannot build token tree: {e.message}", style="red"))

    result = evaluate_report(raw, config)

    if json_output:
        typer.echo(result.model_dump_json(indent=2))
    else:
        typer.echo(result.summary_line())
        if not result.ok and result.column is not None:
            typer.echo(ErrorContext(column=result.column, source=raw).snippet(), err=True)

    if fail_on_error and not result.ok:
        raise typer.Exit(code=1)


def _token_tree(source: str, tokens: list[Token]) -> Tree:
    """Build a rich tree of the token sequence, groups nested."""
    tree = Tree(Text(source, style="bold cyan"))
    _add_tokens(tree, tokens)
    return tree


def _add_tokens(parent: Tree, tokens: list[Token] | tuple[Token, ...]) -> None:
    for token in tokens:
        if isinstance(token, GroupToken):
            branch = parent.add(Text(f"group {token.render()}", style="magenta"))
            _add_tokens(branch, token.tokens)
        elif isinstance(token, NumberToken):
            parent.add(Text(f"{token.number.kind} {token.render()}", style="green"))
        else:
            parent.add(Text(f"operator {token.render()}", style="yellow"))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, prog_name="triadcalc")


__all__ = ["app", "main", "get_version", "version_callback"]
