from __future__ import annotations

import json
from typing import Any

from cred_core.encoding.codec import Codec
from cred_core.errors import CodecError


class JsonCodec(Codec):
    content_type = "application/json"
    aliases = ("json",)

    def dumps(self, document: Any) -> bytes:
        return json.dumps(document, sort_keys=True).encode("utf-8")

    def loads(self, data: bytes) -> Any:
        try:
            return json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CodecError(f"invalid JSON payload: {exc}") from exc
