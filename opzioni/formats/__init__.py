"""
File Formats.

One codec per supported format (JSON, TOML, YAML) and the resolver that
picks a codec from a file's extension.
"""

from opzioni.formats.base import Codec, Format
from opzioni.formats.resolver import (
    enabled_formats,
    file_extension,
    resolve,
    supported_extensions,
)

__all__ = [
    "Codec",
    "Format",
    "enabled_formats",
    "file_extension",
    "resolve",
    "supported_extensions",
]
