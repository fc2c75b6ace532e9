#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/shortcode2html/cli/commands.py
"""Sub-commands of the shortcode2html CLI.

Currently a single command, ``list-tags``, which shows the configured tags
with their descriptions, usage tips and parameters, either as plain text or
as rich tables.
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from shortcode2html.api import default_config
from shortcode2html.cli.config import apply_tag_config, load_config_file
from shortcode2html.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from shortcode2html.exceptions import ConfigurationError
from shortcode2html.registry import RegisteredHandler, ShortcodeRegistry

logger = logging.getLogger(__name__)


def _create_list_tags_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortcode2html list-tags", description="Show available shortcode tags.", add_help=True
    )
    parser.add_argument("tag", nargs="?", help="Show details for a specific tag")
    parser.add_argument("--config", help="Configuration file whose [tags] table to apply")
    parser.add_argument("--all", action="store_true", help="Include disabled tags")
    parser.add_argument("--rich", action="store_true", help="Use rich terminal output")
    return parser


def _format_defaults(entry: RegisteredHandler) -> str:
    return ", ".join(f"{key}={value}" for key, value in entry.defaults.items())


def _print_rich(registry: ShortcodeRegistry, names: list[str], detailed: bool) -> None:
    console = Console()

    if detailed:
        entry = registry.get_entry(names[0])
        metadata = entry.metadata
        content = [
            f"[bold]Name:[/bold] {entry.name}",
            f"[bold]Handler:[/bold] {metadata.name}",
            f"[bold]Description:[/bold] {metadata.description}",
            f"[bold]Enabled:[/bold] {'yes' if entry.enabled else 'no'}",
            f"[bold]Uses body:[/bold] {'yes' if metadata.uses_content else 'no'}",
            f"[bold]Tip:[/bold] {escape(metadata.tip)}",
        ]
        if entry.defaults:
            content.append(f"[bold]Defaults:[/bold] {_format_defaults(entry)}")
        console.print(Panel("\n".join(content), title=f"Tag: {entry.name}"))

        if metadata.parameters:
            table = Table(title="Parameters")
            table.add_column("Name", style="cyan")
            table.add_column("Default", style="green")
            table.add_column("Choices", style="yellow")
            table.add_column("Description", style="white")
            for name, spec in metadata.parameters.items():
                table.add_row(
                    name,
                    spec.default if spec.default is not None else "",
                    ", ".join(spec.choices) if spec.choices else "",
                    spec.help,
                )
            console.print(table)
        return

    table = Table(title=f"Available Tags ({len(names)})")
    table.add_column("Tag", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Tip", style="green")
    for name in names:
        entry = registry.get_entry(name)
        table.add_row(
            entry.name,
            entry.metadata.description,
            escape(entry.metadata.tip),
            style=None if entry.enabled else "dim",
        )
    console.print(table)


def _print_plain(registry: ShortcodeRegistry, names: list[str], detailed: bool) -> None:
    if detailed:
        entry = registry.get_entry(names[0])
        metadata = entry.metadata
        print(f"\n{entry.name}")
        print("=" * 60)
        print(f"Handler: {metadata.name}")
        print(f"Description: {metadata.description}")
        print(f"Enabled: {'yes' if entry.enabled else 'no'}")
        print(f"Tip: {metadata.tip}")
        if entry.defaults:
            print(f"Defaults: {_format_defaults(entry)}")
        if metadata.parameters:
            print("\nParameters:")
            for name, spec in metadata.parameters.items():
                default_str = f" (default: {spec.default})" if spec.default is not None else ""
                print(f"  {name}{default_str}")
                if spec.help:
                    print(f"    {spec.help}")
                if spec.choices:
                    print(f"    choices: {', '.join(spec.choices)}")
        return

    print("\nAvailable Tags")
    print("=" * 60)
    for name in names:
        entry = registry.get_entry(name)
        disabled = "" if entry.enabled else " [disabled]"
        print(f"  {entry.name:12} {entry.metadata.description}{disabled}")
        print(f"  {'':12} {entry.metadata.tip}")
    print(f"\nTotal: {len(names)} tags")
    print("Use 'shortcode2html list-tags <tag>' for details")


def handle_list_tags_command(args: list[str] | None = None) -> int:
    """Handle the ``list-tags`` command.

    Parameters
    ----------
    args : list[str], optional
        Arguments following ``list-tags``

    Returns
    -------
    int
        Exit code

    """
    parser = _create_list_tags_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    try:
        config = default_config()
        if parsed.config:
            file_config = load_config_file(parsed.config)
            config = apply_tag_config(config, file_config.get("tags", {}))
        registry = ShortcodeRegistry(config)
    except (argparse.ArgumentTypeError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    names = registry.list_tags(include_disabled=parsed.all or bool(parsed.tag))
    logger.debug("Listing %d of %d configured tags", len(names), len(registry))
    if parsed.tag:
        if parsed.tag not in names:
            print(f"Error: Tag '{parsed.tag}' not found", file=sys.stderr)
            print(f"Available: {', '.join(names)}", file=sys.stderr)
            return EXIT_ERROR
        names = [parsed.tag]

    if parsed.rich:
        _print_rich(registry, names, detailed=bool(parsed.tag))
    else:
        _print_plain(registry, names, detailed=bool(parsed.tag))
    return EXIT_SUCCESS


def dispatch_command(args: list[str]) -> int | None:
    """Run a sub-command if ``args`` names one.

    Returns
    -------
    int or None
        Exit code if a sub-command was handled, None otherwise

    """
    if not args:
        return None

    if args[0] in ("list-tags", "tags"):
        return handle_list_tags_command(args[1:])

    return None
