"""Main CLI entry point for degenerate.

Samples values from registered generators and record profiles.
"""

from pathlib import Path
from typing import Any
import json
import logging
import sys

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from degenerate import __version__
from degenerate.generators.base import Sampler
from degenerate.generators.registry import get_global_generator_registry
from degenerate.profiles.loader import ProfileLoader, example_profile, load_profile

console = Console()


def _parse_options(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Parse key=value pairs, reading values as YAML scalars or lists."""
    options = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--option")
        key, raw = pair.split("=", 1)
        options[key.strip().replace("-", "_")] = yaml.safe_load(raw)
    return options


def _emit(values: list[Any], output: str | None, pretty: bool) -> None:
    json_output = json.dumps(values, indent=2 if pretty else None, default=str)

    if output:
        Path(output).write_text(json_output)
        console.print(f"[green]Wrote {len(values)} values to {output}[/green]")
    else:
        click.echo(json_output)


def _fail(ctx: click.Context, error: Exception) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    if ctx.obj.get("verbose", False):
        import traceback
        console.print(traceback.format_exc())
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="degenerate")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """degenerate - sample values from property-based testing generators."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console)],
        )


@cli.command()
@click.pass_context
def list_generators(ctx: click.Context) -> None:
    """List registered generators."""
    registry = get_global_generator_registry()

    table = Table(title="Available Generators")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for entry in registry:
        table.add_row(entry.name, entry.description)

    console.print(table)


@cli.command()
@click.argument("generator_name")
@click.option("--count", "-n", type=int, default=10, help="Number of values")
@click.option("--seed", "-s", type=int, help="Random seed")
@click.option("--option", "-O", "option_pairs", multiple=True, help="Generator option as key=value")
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output")
@click.pass_context
def sample(
    ctx: click.Context,
    generator_name: str,
    count: int,
    seed: int | None,
    option_pairs: tuple[str, ...],
    output: str | None,
    pretty: bool,
) -> None:
    """Sample values from a registered generator.

    GENERATOR_NAME is a name shown by list-generators.
    """
    options = _parse_options(option_pairs)

    if generator_name not in get_global_generator_registry():
        console.print(f"[red]Generator '{generator_name}' not found[/red]")
        sys.exit(1)

    try:
        dataset = Sampler(seed=seed).generate(generator_name, count=count, **options)
    except Exception as e:
        _fail(ctx, e)
        return

    _emit(dataset.values, output, pretty)


@cli.command()
@click.argument("profile_path", type=click.Path(exists=True))
@click.option("--count", "-n", type=int, help="Number of records (overrides profile)")
@click.option("--seed", "-s", type=int, help="Random seed (overrides profile)")
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output")
@click.pass_context
def record(
    ctx: click.Context,
    profile_path: str,
    count: int | None,
    seed: int | None,
    output: str | None,
    pretty: bool,
) -> None:
    """Sample records described by a profile.

    PROFILE_PATH is the path to the YAML profile file.
    """
    try:
        profile = load_profile(profile_path)
        if seed is not None:
            profile.seed = seed
        if count is not None:
            profile.count = count

        sampler = Sampler(seed=profile.seed)
        dataset = sampler.generate(profile.to_strategy(), count=profile.count)
    except Exception as e:
        _fail(ctx, e)
        return

    _emit(dataset.values, output, pretty)


@cli.command()
@click.option("--name", "-n", default="user", help="Profile name")
@click.option("--output", "-o", type=click.Path(), default="profile.yaml", help="Output file path")
@click.pass_context
def init_profile(ctx: click.Context, name: str, output: str) -> None:
    """Initialize a new record profile.

    Creates an example profile YAML file showing every field kind.
    """
    loader = ProfileLoader()
    loader.save_file(example_profile(name), output)

    console.print(f"[green]Created profile: {output}[/green]")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
