"""YAML codec, backed by PyYAML's safe loader and dumper."""

from __future__ import annotations

from typing import Any

import yaml

from opzioni.formats.base import Codec, Format


class YamlCodec(Codec):
    """Block-style YAML, keys kept in payload field order."""

    format = Format.YAML
    parse_errors = (yaml.YAMLError, ValueError, RecursionError)
    render_errors = (yaml.YAMLError, TypeError, ValueError, RecursionError)

    def _parse(self, text: str) -> Any:
        return yaml.safe_load(text)

    def _render(self, data: Any) -> str:
        return yaml.safe_dump(
            data,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
