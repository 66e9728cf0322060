"""CLI entry point for dag-layout."""

import logging
import sys

import click

from dag_layout.config import LayoutConfig
from dag_layout.errors import ConfigError, CycleError
from dag_layout.export import to_json
from dag_layout.layout.engine import full_layout_with_config
from dag_layout.parsers import load


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--theme", "-t", "theme", type=click.Path(exists=True), default=None, help="JSON theme file with layout geometry")
@click.option("--node-width", type=float, default=None, help="Width of every node")
@click.option("--column-step", type=float, default=None, help="Horizontal distance between adjacent layers")
@click.option("--vertical-step", type=float, default=None, help="Minimum vertical distance between nodes in a layer")
@click.option("--padding", "-p", type=float, default=None, help="Canvas padding on every side")
@click.option("--format", "-f", "fmt", type=click.Choice(["json", "edgelist"]), default=None, help="Input format (default: detect)")
@click.option("--strict", is_flag=True, help="Fail on cyclic input instead of producing a degenerate layout")
@click.option("--indent", type=int, default=2, help="JSON indentation (0 for compact)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log layout diagnostics to stderr")
def main(
    input: str | None,
    theme: str | None,
    node_width: float | None,
    column_step: float | None,
    vertical_step: float | None,
    padding: float | None,
    fmt: str | None,
    strict: bool,
    indent: int,
    output: str | None,
    verbose: bool,
) -> None:
    """Compute a layered left-to-right layout for a DAG and print it as JSON."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = LayoutConfig.from_file(theme) if theme else LayoutConfig()
        config = config.replace(
            node_width=node_width,
            column_step=column_step,
            vertical_step=vertical_step,
            padding=padding,
        )
    except (ConfigError, OSError) as e:
        click.echo(f"config error: {e}", err=True)
        sys.exit(1)

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        gir = load(text, fmt)
    except ValueError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    try:
        result = full_layout_with_config(gir, config, strict=strict)
    except CycleError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = to_json(result, indent=indent or None) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
