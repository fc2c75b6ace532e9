"""Command-line interface for shortcode2html.

Expands the shortcodes in one or more text files (or stdin) and writes the
HTML to stdout or a file.

Examples
--------
Render a file against a site root::

    $ shortcode2html page.txt --base-url https://example.com/

Render stdin with reproducible random strings::

    $ echo "id-[random/]" | shortcode2html --seed 7

Remove shortcodes, keeping their text::

    $ shortcode2html page.txt --strip --out excerpt.txt

Show the available tags::

    $ shortcode2html list-tags --rich

Configuration is read from ``--config``, then from the file named by
``SHORTCODE2HTML_CONFIG``, then from the first ``.shortcode2html.toml``,
``.yaml``, ``.yml``, ``.json`` or ``pyproject.toml`` with a
``[tool.shortcode2html]`` section found from the current directory upwards
or in the home directory. Command-line flags override file settings.

"""

import argparse
import logging
import os
import sys
from typing import Any, Dict

from shortcode2html import __version__
from shortcode2html.api import default_config, render, strip
from shortcode2html.capabilities import Capabilities
from shortcode2html.cli.commands import dispatch_command
from shortcode2html.cli.config import apply_tag_config, load_config_with_priority
from shortcode2html.constants import (
    DEFAULT_BASE_URL,
    ENV_CONFIG_VARIABLE,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from shortcode2html.exceptions import RenderingError, Shortcode2HtmlError, ValidationError
from shortcode2html.logging_utils import configure_logging
from shortcode2html.options.shortcode import RegistryConfig, ShortcodeRendererOptions
from shortcode2html.registry import ShortcodeRegistry, get_registry

logger = logging.getLogger(__name__)

__all__ = ["create_parser", "main"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the render command."""
    parser = argparse.ArgumentParser(
        prog="shortcode2html",
        description="Expand [shortcode] markup into HTML.",
        epilog="Sub-commands: list-tags [TAG] [--rich]",
    )
    parser.add_argument("input", nargs="*", help="Input files; '-' or nothing reads stdin")
    parser.add_argument("--out", "-o", help="Write output to this file instead of stdout")

    config_group = parser.add_mutually_exclusive_group()
    config_group.add_argument("--config", help="Configuration file (TOML, YAML or JSON)")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    parser.add_argument("--base-url", help=f"Site root used to resolve paths (default: {DEFAULT_BASE_URL})")
    parser.add_argument("--seed", type=int, help="Seed for reproducible [random] output")
    parser.add_argument(
        "--disable", action="append", default=[], metavar="TAG", help="Leave TAG untouched (repeatable)"
    )
    option_help = ShortcodeRendererOptions.field_help()
    parser.add_argument("--strict", action="store_true", help=option_help["strict_mode"])
    parser.add_argument("--strip", action="store_true", help="Remove shortcodes and keep their text")

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_settings(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    if parsed_args.no_config:
        return {}
    return load_config_with_priority(
        explicit_path=parsed_args.config,
        env_var_path=os.environ.get(ENV_CONFIG_VARIABLE),
    )


def build_registry(settings: Dict[str, Any], disabled: list[str]) -> ShortcodeRegistry:
    """Build the registry from file settings and ``--disable`` flags.

    Raises
    ------
    ConfigurationError
        If the tag configuration is invalid

    """
    config: RegistryConfig = apply_tag_config(default_config(), settings.get("tags", {}))
    if disabled:
        unknown = [name for name in disabled if config.get(name) is None]
        if unknown:
            logger.warning("Ignoring --disable for unconfigured tags: %s", ", ".join(unknown))
        config = config.disable(*disabled)
    return get_registry(config)


def _read_inputs(paths: list[str]) -> list[str]:
    """Read every input, with '-' (or no inputs at all) meaning stdin."""
    texts = []
    for path in paths or ["-"]:
        if path == "-":
            texts.append(sys.stdin.read())
            continue
        with open(path, "r", encoding="utf-8") as f:
            texts.append(f.read())
        logger.debug("Read %s", path)
    return texts


def _write_output(content: str, out_path: str | None) -> None:
    if out_path is None:
        sys.stdout.write(content)
        return
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("Wrote %s", out_path)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return its exit code."""
    if args is None:
        args = sys.argv[1:]

    command_result = dispatch_command(args)
    if command_result is not None:
        return command_result

    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        settings = _load_settings(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        registry = build_registry(settings, parsed_args.disable)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    base_url = parsed_args.base_url or settings.get("base_url", DEFAULT_BASE_URL)
    seed = parsed_args.seed if parsed_args.seed is not None else settings.get("seed")
    capabilities = Capabilities.for_site(base_url, seed=seed)
    options = ShortcodeRendererOptions(strict_mode=parsed_args.strict or settings.get("strict_mode", False))

    try:
        texts = _read_inputs(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read input: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        if parsed_args.strip:
            outputs = [strip(text, registry) for text in texts]
        else:
            outputs = [render(text, registry, capabilities, options) for text in texts]
    except RenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR
    except Shortcode2HtmlError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        _write_output("".join(outputs), parsed_args.out)
    except OSError as e:
        print(f"Error: Cannot write output: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
