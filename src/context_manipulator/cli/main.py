"""Main CLI entry point for the context-manipulator command-line tool.

Encodes or filters text for an output context, reading from arguments or
standard input and writing to standard output or a file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from context_manipulator import __version__
from context_manipulator.api.registry import ManipulationType, default_registry
from context_manipulator.api.secure_encoder import SecureEncoder
from context_manipulator.api.secure_filter import SecureFilter
from context_manipulator.shared.config import ConfigError, ManipulationConfig
from context_manipulator.shared.errors import SinkWriteError, UnknownContextError
from context_manipulator.shared.logging import get_logger

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SINK_FAILURE = 2
EXIT_INTERRUPTED = 130


def load_config(config_path: Optional[Path]) -> ManipulationConfig:
    """Load CLI configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    if config_path is None:
        return ManipulationConfig()
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e
    return ManipulationConfig.from_json(content)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="context-manipulator",
        description="Encode or filter untrusted text for HTML, XML, JavaScript, "
                    "JSON, URI and CDATA output contexts"
    )

    parser.add_argument("--version", action="version", version=__version__)

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for command, help_text in (
        ("encode", "Replace unsafe characters with context-safe escapes"),
        ("filter", "Remove unsafe characters"),
        ("run", "Encode or filter, as set by the configured mode"),
    ):
        command_parser = subparsers.add_parser(command, help=help_text)
        command_parser.add_argument(
            "text",
            nargs="*",
            help="Text to process (default: read standard input)"
        )
        command_parser.add_argument(
            "--context", "-x",
            help="Output context name, e.g. html_content or uri-component "
                 "(default: from config)"
        )
        command_parser.add_argument(
            "--output", "-o",
            type=Path,
            help="Output file (default: stdout)"
        )

    subparsers.add_parser("contexts", help="List available output contexts")

    return parser


def _read_input(args: argparse.Namespace, config: ManipulationConfig) -> str:
    if args.text:
        return " ".join(args.text)
    stream = getattr(sys.stdin, "buffer", None)
    if stream is not None:
        return stream.read().decode(config.input_encoding)
    return sys.stdin.read()


def _write(
    args: argparse.Namespace,
    config: ManipulationConfig,
    text: str,
    out: TextIO
) -> None:
    context = (
        ManipulationType.from_name(args.context) if args.context else config.context
    )
    mode = config.mode if args.command == "run" else args.command
    if mode == "encode":
        SecureEncoder(correlation_id=config.correlation_id).encode(context, text, out)
    else:
        SecureFilter(correlation_id=config.correlation_id).filter(context, text, out)


def cmd_transform(args: argparse.Namespace, config: ManipulationConfig) -> int:
    """Handle encode, filter and run commands."""
    logger = get_logger(__name__, config.correlation_id, "cli")
    # Arguments get a trailing newline; stdin output mirrors the input
    terminator = "\n" if args.text else ""

    try:
        text = _read_input(args, config)
        if args.output:
            with args.output.open("w", encoding=config.output_encoding) as out:
                _write(args, config, text, out)
                out.write(terminator)
            print(f"Output written to {args.output}", file=sys.stderr)
        else:
            _write(args, config, text, sys.stdout)
            sys.stdout.write(terminator)
    except (ValueError, UnknownContextError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except SinkWriteError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_SINK_FAILURE
    except OSError as e:
        logger.error("Could not open output", extra={"output": str(args.output)})
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_SINK_FAILURE

    return EXIT_OK


def cmd_contexts(args: argparse.Namespace, config: ManipulationConfig) -> int:
    """Handle contexts command."""
    for context in default_registry().contexts():
        if isinstance(context, ManipulationType):
            marker = "*" if context is config.context else " "
            print(f"{marker} {context.value}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)
    else:
        logging.basicConfig(level=getattr(logging, config.logging_level.upper()))

    # Route to appropriate command handler
    try:
        if args.command in ("encode", "filter", "run"):
            return cmd_transform(args, config)
        if args.command == "contexts":
            return cmd_contexts(args, config)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_USAGE

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
