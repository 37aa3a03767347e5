"""
opzioni - typed configuration files.

Load a typed configuration value from a JSON, TOML or YAML file, share it
between threads or asyncio tasks behind a read/write lock, and save it back
in the format it was loaded from.
"""

from opzioni.config import AsyncConfig, Config, ConfigBuilder
from opzioni.errors import (
    ConfigLoadError,
    MissingOriginError,
    OpzioniError,
    SerializationError,
    UnknownFileExtension,
)
from opzioni.formats import Format
from opzioni.locks import AsyncRWLock, RWLock, WriteGuard

__version__ = "3.0.1"

__all__ = [
    "AsyncConfig",
    "AsyncRWLock",
    "Config",
    "ConfigBuilder",
    "ConfigLoadError",
    "Format",
    "MissingOriginError",
    "OpzioniError",
    "RWLock",
    "SerializationError",
    "UnknownFileExtension",
    "WriteGuard",
]
