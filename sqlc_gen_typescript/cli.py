"""
Command-line entry point of the sqlc process plugin.

sqlc runs the plugin with the RPC method name as its only argument, writes
the request to standard input and reads the response from standard output.
Diagnostics go to standard error.
"""

import argparse
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .codegen.core.config import ConfigError
from .codegen.core.generator import GenerationResult
from .logging_config import LOG_LEVEL_ENV, get_logger, setup_logging
from .plugin import (
    PluginProtocolError,
    WireFormat,
    check_method,
    encode_response,
    handle_request,
)
from .utils import RequestLoaderError, load_request, write_response

logger = get_logger(__name__)

# stdout carries the response
console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the plugin command."""
    parser = argparse.ArgumentParser(
        prog="sqlc-gen-typescript",
        description="Generate TypeScript query modules from sqlc query descriptors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  sqlc-gen-typescript /plugin.CodegenService/Generate < request.bin > response.bin
  sqlc-gen-typescript --format json --input request.json --output response.json

Log level can also be set with the {LOG_LEVEL_ENV} environment variable.
        """.strip(),
    )

    parser.add_argument(
        "method",
        nargs="?",
        help="RPC method passed by sqlc (only Generate is supported)",
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=[wire_format.value for wire_format in WireFormat],
        default=WireFormat.AUTO.value,
        help="Request/response encoding (default: detect from the request)",
    )

    parser.add_argument(
        "--input", "-i", metavar="FILE", help="Read the request from FILE (default: stdin)"
    )

    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write the response to FILE (default: stdout)",
    )

    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Logging level: DEBUG, INFO, WARNING or ERROR (default: WARNING)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata on stderr",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the plugin.

    Args:
        argv: Command line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, 1 for failure, 2 for usage errors)
    """
    args = create_parser().parse_args(argv)

    try:
        setup_logging(args.log_level, console)
    except ValueError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 2

    check_method(args.method)

    try:
        return _generate_and_output(args)
    except (RequestLoaderError, PluginProtocolError, ConfigError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1


def _generate_and_output(args: argparse.Namespace) -> int:
    """Decode the request, generate code and write the response."""
    data = load_request(args.input)
    result, wire_format = handle_request(data, args.format)

    if not result.success:
        console.print(
            f"[red]✗ Code generation failed:[/red] {escape(result.error_message)}"
        )
        return 1

    if args.verbose:
        _print_metadata(result)

    write_response(encode_response(result.files, wire_format), args.output)
    logger.info("Generated %d files", len(result.files))
    return 0


def _print_metadata(result: GenerationResult) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    for output in result.files:
        metadata_table.add_row("Output", escape(output.name))

    console.print()
    console.print(metadata_table)
