from __future__ import annotations

from typing import Any

import yaml

from cred_core.encoding.codec import Codec
from cred_core.errors import CodecError


class YamlCodec(Codec):
    content_type = "application/yaml"
    aliases = ("yaml", "application/x-yaml", "text/yaml")

    def dumps(self, document: Any) -> bytes:
        return yaml.safe_dump(
            document, default_flow_style=False, sort_keys=True
        ).encode("utf-8")

    def loads(self, data: bytes) -> Any:
        try:
            return yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise CodecError(f"invalid YAML payload: {exc}") from exc
