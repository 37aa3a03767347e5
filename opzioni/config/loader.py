"""
Configuration File Gateway.

Reads and writes a single configuration file, resolving the codec from
the file extension on every call:

- ``load_file``: resolve codec, read text, decode into the payload type.
- ``save_file``: resolve codec, encode the payload value, overwrite the file.

The codec is never cached between a load and a later save of the same
path, so renaming a file to another extension changes its format on the
next call.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Type, TypeVar

from loguru import logger

from opzioni.errors import SerializationError
from opzioni.formats import resolve

T = TypeVar("T")

ENCODING = "utf-8"


def load_file(path: str | Path, payload_type: Type[T]) -> T:
    """
    Load and decode a configuration file.

    Args:
        path: Configuration file path; its extension selects the format.
        payload_type: Type to decode the file content into.

    Returns:
        The decoded payload value.

    Raises:
        UnknownFileExtension: If the extension maps to no enabled format.
        SerializationError: If the file cannot be read or decoded.
    """
    file_path = Path(path)
    codec = resolve(file_path)

    logger.trace(f"Loading configuration: {file_path}")
    try:
        text = file_path.read_text(encoding=ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise SerializationError(str(e)) from e

    value = codec.decode(text, payload_type)
    logger.debug(f"Configuration loaded: {file_path} ({codec.format.value})")
    return value


def save_file(path: str | Path, value: Any, payload_type: Any) -> None:
    """
    Encode a payload value and write it to a configuration file.

    Any existing content is overwritten.

    Raises:
        UnknownFileExtension: If the extension maps to no enabled format.
        SerializationError: If the value cannot be encoded or the file
            cannot be written.
    """
    file_path = Path(path)
    codec = resolve(file_path)

    logger.trace(f"Saving configuration: {file_path}")
    text = codec.encode(value, payload_type)
    try:
        file_path.write_text(text, encoding=ENCODING)
    except OSError as e:
        raise SerializationError(str(e)) from e

    logger.debug(f"Configuration saved: {file_path} ({codec.format.value})")
