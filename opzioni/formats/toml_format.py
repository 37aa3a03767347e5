"""TOML codec: parsed with ``tomllib`` (``tomli`` before 3.11), emitted with ``tomli_w``."""

from __future__ import annotations

import sys
from typing import Any

import tomli_w

from opzioni.errors import SerializationError
from opzioni.formats.base import Codec, Format

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


def _drop_none(data: Any) -> Any:
    """Remove None-valued keys from tables, recursively."""
    if isinstance(data, dict):
        return {k: _drop_none(v) for k, v in data.items() if v is not None}
    if isinstance(data, list):
        return [_drop_none(item) for item in data]
    return data


class TomlCodec(Codec):
    """
    TOML documents.

    TOML has no null value, so ``None`` fields are dropped on encode and
    only come back if the payload schema defaults them to ``None``.
    """

    format = Format.TOML
    parse_errors = (tomllib.TOMLDecodeError, ValueError, RecursionError)

    def _parse(self, text: str) -> Any:
        return tomllib.loads(text)

    def _render(self, data: Any) -> str:
        if not isinstance(data, dict):
            raise SerializationError(
                f"TOML documents must be a table at the top level, "
                f"got {type(data).__name__}"
            )
        return tomli_w.dumps(_drop_none(data))
