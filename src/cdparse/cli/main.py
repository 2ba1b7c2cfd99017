# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the cdparse command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from cdparse.assembly.grid import DiagramSyntaxError, parse_diagram
from cdparse.cli.config import CONFIG_FILE_NAME, CliConfig, ConfigError, load_config
from cdparse.parser.arrow import ArrowSyntaxError, parse_arrow
from cdparse.parser.lexer import tokenize
from cdparse.parser.tokenizer import Token

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the cdparse CLI."""
    parser = argparse.ArgumentParser(
        prog="cdparse",
        description="cdparse - tikzcd diagram and arrow parser",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a YAML config file (default: ./{CONFIG_FILE_NAME} if present)",
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default=None,
        help="Output format (overrides the config file)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Dump the token stream of a diagram body",
        description="Tokenize a tikzcd diagram body and print the tokens.",
    )
    tokens_parser.add_argument("file", help="File containing the diagram body ('-' for stdin)")

    # arrow subcommand
    arrow_parser = subparsers.add_parser(
        "arrow",
        help="Interpret a single arrow command",
        description="Parse an \\arrow[...] command and print its direction and options.",
    )
    arrow_parser.add_argument("text", help="The arrow command, e.g. '\\arrow[rd, \"f\"]'")

    # grid subcommand
    grid_parser = subparsers.add_parser(
        "grid",
        help="Assemble a diagram body into nodes and edges",
        description="Parse a tikzcd diagram body into grid-placed nodes and edges.",
    )
    grid_parser.add_argument("file", help="File containing the diagram body ('-' for stdin)")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Load configuration, then dispatch to the subcommand handler."""
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.log_level)

    if args.command == "tokens":
        return _cmd_tokens(args, config)
    if args.command == "arrow":
        return _cmd_arrow(args, config)
    if args.command == "grid":
        return _cmd_grid(args, config)
    return 0


def _resolve_config(args: argparse.Namespace) -> CliConfig:
    """Build the effective config from the config file and command-line flags."""
    if args.config is not None:
        config = load_config(Path(args.config))
    elif Path(CONFIG_FILE_NAME).exists():
        config = load_config(Path(CONFIG_FILE_NAME))
    else:
        config = CliConfig()

    if args.format is not None:
        config = config.model_copy(update={"output_format": args.format})
    return config


def _cmd_tokens(args: argparse.Namespace, config: CliConfig) -> int:
    """Handle the tokens subcommand."""
    source = _read_source(args.file)
    if source is None:
        return 1

    tokens = [_token_to_data(t, config.include_internal) for t in tokenize(source)]
    _print_data([t for t in tokens if t is not None], config)
    if tokens and tokens[-1] is not None and tokens[-1]["type"] is None:
        print(f"Error: no rule matches at offset {tokens[-1]['position']}", file=sys.stderr)
        return 1
    return 0


def _cmd_arrow(args: argparse.Namespace, config: CliConfig) -> int:
    """Handle the arrow subcommand."""
    try:
        arrow = parse_arrow(args.text)
    except ArrowSyntaxError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _print_data(arrow.model_dump(), config)
    return 0


def _cmd_grid(args: argparse.Namespace, config: CliConfig) -> int:
    """Handle the grid subcommand."""
    source = _read_source(args.file)
    if source is None:
        return 1

    try:
        diagram = parse_diagram(source)
    except DiagramSyntaxError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _print_data(diagram.model_dump(), config)
    return 0


def _read_source(name: str) -> str | None:
    """Read input text from a file path or stdin, printing an error on failure."""
    if name == "-":
        return sys.stdin.read()
    try:
        return Path(name).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read '{name}': {exc}", file=sys.stderr)
        return None


def _token_to_data(token: Token, include_internal: bool) -> dict[str, Any] | None:
    """Convert a token to plain data, or None if it is filtered out."""
    if token.is_internal and not include_internal:
        return None
    value = token.value
    if isinstance(value, tuple):
        value = [d for d in (_token_to_data(t, include_internal) for t in value) if d is not None]
    return {
        "type": token.type.value if token.type is not None else None,
        "value": value,
        "position": token.position,
        "length": token.length,
    }


def _print_data(data: Any, config: CliConfig) -> None:
    """Serialize data in the configured output format and print it."""
    if config.output_format == "json":
        print(json.dumps(data, indent=2))
    else:
        print(yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False), end="")


def _plain(data: Any) -> Any:
    """Turn tuples into lists so that yaml.safe_dump accepts the data."""
    if isinstance(data, dict):
        return {k: _plain(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [_plain(v) for v in data]
    return data
