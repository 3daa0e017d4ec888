"""CLI interface for Feed Enhancer using Typer."""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from . import __version__
from .main import FeedEnhancerApp


USAGE = "Usage: feed-enhancer [run] --i <input_dir> --o <output_dir> [--c <config_path>]"

app = typer.Typer(
    name="feed-enhancer",
    help="Filter feed items by allow-list and block-list terms",
    add_completion=False,
)


def _run_tree(
    input_dir: Optional[Path],
    output_dir: Optional[Path],
    config_file: Optional[Path],
    dry_run: bool = False,
    verbose: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    if input_dir is None or output_dir is None:
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)

    try:
        app_instance = FeedEnhancerApp(config_file, log_file=log_file)
        exit_code = app_instance.run(input_dir, output_dir, dry_run=dry_run, verbose=verbose)
    except Exception as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)
    raise typer.Exit(exit_code)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    input_dir: Annotated[Optional[Path], typer.Option("--i", "--input", "-i", help="Input directory")] = None,
    output_dir: Annotated[Optional[Path], typer.Option("--o", "--output", "-o", help="Output directory")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--c", "--config", "-c", help="Path to config file")] = None,
) -> None:
    """Filter feed items by allow-list and block-list terms.

    Without a command, behaves like `run` with the given --i/--o/--c.
    """
    if ctx.invoked_subcommand is not None:
        return
    _run_tree(input_dir, output_dir, config_file)


@app.command()
def run(
    input_dir: Annotated[Optional[Path], typer.Option("--input", "--i", "-i", help="Input directory")] = None,
    output_dir: Annotated[Optional[Path], typer.Option("--output", "--o", "-o", help="Output directory")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "--c", "-c", help="Path to config file")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be done without writing")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show detailed output")] = False,
    log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Also write logs to this file")] = None,
) -> None:
    """Filter every feed in the input tree into the output tree."""
    _run_tree(input_dir, output_dir, config_file, dry_run=dry_run, verbose=verbose, log_file=log_file)


@app.command(name="filter")
def filter_feed(
    feed_file: Annotated[Path, typer.Argument(help="Feed file to filter")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "--c", "-c", help="Path to config file")] = None,
    output_file: Annotated[Optional[Path], typer.Option("--output", "--o", "-o", help="Write result here instead of stdout")] = None,
) -> None:
    """Filter a single feed file."""
    try:
        app_instance = FeedEnhancerApp(config_file)
        result = app_instance.filter_file(feed_file)
        if output_file:
            app_instance.writer.write_text(output_file, result.content)
            typer.echo(f"✓ Kept {result.kept_items} of {result.total_items} items -> {output_file}")
        else:
            typer.echo(result.content, nl=False)
    except Exception as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def config(
    show: Annotated[bool, typer.Option("--show", help="Show effective config")] = False,
    example: Annotated[bool, typer.Option("--example", help="Generate example config")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "--c", "-c", help="Path to config file")] = None,
) -> None:
    """Manage Feed Enhancer configuration."""
    if example:
        from .config import create_example_config
        typer.echo(create_example_config())
    elif show:
        from .config import dump_config, load_config
        config_obj = load_config(config_file)
        if config_obj is None:
            typer.echo("No usable config: filtering disabled")
        else:
            typer.echo(dump_config(config_obj))
    else:
        typer.echo("Use --show to view config or --example to generate example")


@app.command()
def info(
    config_file: Annotated[Optional[Path], typer.Option("--config", "--c", "-c", help="Path to config file")] = None,
) -> None:
    """Show version and effective configuration."""
    typer.echo(f"Feed Enhancer v{__version__}")

    try:
        app_instance = FeedEnhancerApp(config_file)
        info_data = app_instance.get_info()
    except Exception as e:
        typer.echo(f"Warning: Could not load application info: {e}")
        return

    typer.echo(f"  Config file: {info_data.get('config_file') or 'N/A'}")
    typer.echo(f"  Filtering: {'enabled' if info_data.get('filtering') else 'disabled'}")
    typer.echo(f"  Allow-list: {', '.join(info_data.get('allow_list', [])) or '-'}")
    typer.echo(f"  Block-list: {', '.join(info_data.get('block_list', [])) or '-'}")
    typer.echo(f"  Feed extensions: {', '.join(info_data.get('feed_extensions', []))}")
    typer.echo(f"  Log level: {info_data.get('log_level', 'N/A')}")


if __name__ == "__main__":
    app()
