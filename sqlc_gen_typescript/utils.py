"""Utility functions for reading plugin requests and writing responses.

This module provides functions for loading request bytes from files or
standard input with proper error handling.
"""

import sys
from pathlib import Path
from typing import BinaryIO, Optional

from .logging_config import get_logger

logger = get_logger(__name__)


class RequestLoaderError(Exception):
    """Custom exception for request loading errors."""

    pass


def load_request_from_file(file_path: str | Path) -> bytes:
    """Load a request from a local file.

    Args:
        file_path: Path to the encoded request.

    Returns:
        Raw request bytes.

    Raises:
        RequestLoaderError: If the file doesn't exist or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load request from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise RequestLoaderError(f"File not found: {file_path}")

    try:
        data = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise RequestLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Loaded {len(data)} bytes from {file_path}")
    return data


def load_request_from_stream(stream: Optional[BinaryIO] = None) -> bytes:
    """Load a request from a binary stream (default: standard input)."""
    stream = stream or sys.stdin.buffer
    try:
        data = stream.read()
    except OSError as e:
        logger.error(f"Error reading request stream: {e}", exc_info=True)
        raise RequestLoaderError(f"Error reading request stream: {e}") from e

    logger.info(f"Loaded {len(data)} bytes from standard input")
    return data


def load_request(
    file_path: str | Path | None = None, stream: Optional[BinaryIO] = None
) -> bytes:
    """Load request bytes from a file, or from a stream when no file is given.

    Raises:
        RequestLoaderError: If loading fails or the request is empty.
    """
    data = load_request_from_file(file_path) if file_path else load_request_from_stream(stream)

    if not data:
        logger.error("Empty request")
        raise RequestLoaderError("Empty request: nothing was sent on the input")

    return data


def write_response(
    data: bytes, file_path: str | Path | None = None, stream: Optional[BinaryIO] = None
) -> None:
    """Write response bytes to a file, or to a stream (default: standard output).

    Raises:
        RequestLoaderError: If the response cannot be written.
    """
    try:
        if file_path:
            Path(file_path).write_bytes(data)
            logger.info(f"Wrote {len(data)} bytes to {file_path}")
            return

        stream = stream or sys.stdout.buffer
        stream.write(data)
        stream.flush()
    except OSError as e:
        logger.error(f"Error writing response: {e}", exc_info=True)
        raise RequestLoaderError(f"Error writing response: {e}") from e
