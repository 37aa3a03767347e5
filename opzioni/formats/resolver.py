"""
Format Resolver.

Maps a file path's extension to the codec for its format. This is the
single source of truth for which extensions are supported. Matching is
exact and case-sensitive; file contents are never inspected.

A format whose backing library is not installed is treated exactly like
an unknown extension.
"""

from __future__ import annotations

import importlib.util
import sys
from functools import lru_cache
from pathlib import PurePath
from typing import Dict, FrozenSet, Optional, Tuple

from loguru import logger

from opzioni.errors import UnknownFileExtension
from opzioni.formats.base import Codec, Format


EXTENSION_FORMATS: Dict[str, Format] = {
    "json": Format.JSON,
    "toml": Format.TOML,
    "yaml": Format.YAML,
    "yml": Format.YAML,
}

# Format -> importable modules it needs beyond the standard library
FORMAT_REQUIREMENTS: Dict[Format, Tuple[str, ...]] = {
    Format.JSON: (),
    Format.TOML: ("tomli_w",) if sys.version_info >= (3, 11) else ("tomli", "tomli_w"),
    Format.YAML: ("yaml",),
}


def file_extension(path: str | PurePath) -> Optional[str]:
    """
    Extract the extension of the final path component.

    Examples:
        cfg.json -> "json"
        archive.tar.yml -> "yml"
        cfg -> None
        .json -> None (dot-file, no extension)
        cfg. -> ""
        .. -> None
    """
    name = PurePath(path).name
    if name in ("", ".", ".."):
        return None
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


@lru_cache(maxsize=None)
def enabled_formats() -> FrozenSet[Format]:
    """Return the formats whose backing library is importable."""
    enabled = set()
    for fmt, modules in FORMAT_REQUIREMENTS.items():
        missing = [m for m in modules if importlib.util.find_spec(m) is None]
        if not missing:
            enabled.add(fmt)
        else:
            logger.debug(f"Format {fmt.value} disabled: missing {', '.join(missing)}")
    return frozenset(enabled)


def supported_extensions() -> Tuple[str, ...]:
    """Return the sorted extensions of all enabled formats."""
    enabled = enabled_formats()
    return tuple(sorted(ext for ext, fmt in EXTENSION_FORMATS.items() if fmt in enabled))


@lru_cache(maxsize=None)
def codec_for(fmt: Format) -> Codec:
    """Build the codec for a format (once per format)."""
    if fmt is Format.JSON:
        from opzioni.formats.json_format import JsonCodec
        return JsonCodec()
    if fmt is Format.TOML:
        from opzioni.formats.toml_format import TomlCodec
        return TomlCodec()
    if fmt is Format.YAML:
        from opzioni.formats.yaml_format import YamlCodec
        return YamlCodec()

    # Should not reach here
    raise ValueError(f"Unhandled format: {fmt}")


def resolve(path: str | PurePath) -> Codec:
    """
    Select the codec for a file path.

    Args:
        path: Configuration file path.

    Returns:
        The codec registered for the path's extension.

    Raises:
        UnknownFileExtension: If the path has no extension (detail None),
            or its extension is unknown or its format is not installed
            (detail is the raw extension).
    """
    ext = file_extension(path)
    if ext is None:
        raise UnknownFileExtension(None)

    fmt = EXTENSION_FORMATS.get(ext)
    if fmt is None or fmt not in enabled_formats():
        logger.debug(
            f"Unknown extension '{ext}' for {path} "
            f"(supported: {', '.join(supported_extensions())})"
        )
        raise UnknownFileExtension(ext)

    codec = codec_for(fmt)
    logger.debug(f"Resolved {path} -> {fmt.value}")
    return codec
