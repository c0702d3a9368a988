"""
Content-type selected codecs.

A selector is either None (process default), a content-type string or a
Codec instance:

    data = marshal("application/yaml", cred)
    unmarshal(None, data, AwsCredential())
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from pydantic import BaseModel

from cred_core.encoding.codec import Codec
from cred_core.encoding.json_codec import JsonCodec
from cred_core.encoding.yaml_codec import YamlCodec
from cred_core.errors import UnsupportedContentTypeError

if TYPE_CHECKING:
    from cred_core.credentials.models import CredentialBase

CodecSelector = Optional[Union[str, Codec]]

_lock = threading.Lock()
_codecs: Dict[str, Codec] = {}
_default: Optional[Codec] = None


def _normalize(content_type: str) -> str:
    # drop parameters such as "; charset=utf-8"
    return content_type.split(";", 1)[0].strip().lower()


def register_codec(codec: Codec) -> None:
    """Register `codec` under its content type and all of its aliases."""
    with _lock:
        for name in (codec.content_type, *codec.aliases):
            _codecs[_normalize(name)] = codec


def registered_content_types() -> List[str]:
    with _lock:
        return sorted({c.content_type for c in _codecs.values()})


def codec_for(content_type: str) -> Codec:
    with _lock:
        codec = _codecs.get(_normalize(content_type))
    if codec is None:
        raise UnsupportedContentTypeError(
            f"Unsupported content type: {content_type!r}"
        )
    return codec


def get_default_codec() -> Codec:
    with _lock:
        codec = _default
    if codec is None:
        raise UnsupportedContentTypeError("No default codec configured")
    return codec


def set_default_codec(selector: Union[str, Codec]) -> Codec:
    """Change the process-wide default codec and return it."""
    global _default
    codec = selector if isinstance(selector, Codec) else codec_for(selector)
    with _lock:
        _default = codec
    return codec


def resolve_codec(selector: CodecSelector, default: Optional[Codec] = None) -> Codec:
    """
    Resolve a selector to a codec. None picks `default` if given, else the
    process-wide default codec.
    """
    if selector is None:
        return default if default is not None else get_default_codec()
    if isinstance(selector, Codec):
        return selector
    return codec_for(selector)


def marshal(selector: CodecSelector, credential: BaseModel) -> bytes:
    return resolve_codec(selector).marshal(credential)


def unmarshal(selector: CodecSelector, data: bytes, target: "CredentialBase") -> None:
    resolve_codec(selector).unmarshal(data, target)


JSON = JsonCodec()
YAML = YamlCodec()
register_codec(JSON)
register_codec(YAML)
set_default_codec(JSON)

__all__ = [
    "Codec",
    "CodecSelector",
    "JSON",
    "JsonCodec",
    "YAML",
    "YamlCodec",
    "codec_for",
    "get_default_codec",
    "marshal",
    "register_codec",
    "registered_content_types",
    "resolve_codec",
    "set_default_codec",
    "unmarshal",
]
