"""JSON codec."""

from __future__ import annotations

import json
from typing import Any

from opzioni.formats.base import Codec, Format


class JsonCodec(Codec):
    """Pretty-printed JSON with two-space indentation."""

    format = Format.JSON
    parse_errors = (ValueError, RecursionError)

    def _parse(self, text: str) -> Any:
        return json.loads(text)

    def _render(self, data: Any) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False)
