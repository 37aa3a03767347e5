"""
Configuration Handles.

Handles own a typed configuration value behind a read/write lock and
remember the file it came from:
- Config: blocking variant for threaded code.
- AsyncConfig: cooperative variant for asyncio code.
- ConfigBuilder: loads a file into either handle, with optional
  default-on-error recovery.
"""

from opzioni.config.aio import AsyncConfig
from opzioni.config.base import BaseConfig, ConfigBuilder
from opzioni.config.loader import load_file, save_file
from opzioni.config.sync import Config

__all__ = [
    "AsyncConfig",
    "BaseConfig",
    "Config",
    "ConfigBuilder",
    "load_file",
    "save_file",
]
