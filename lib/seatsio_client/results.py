from __future__ import annotations

import gzip
import json
import zlib
from dataclasses import dataclass
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class JsonResult:
    value: Any
    kind: ClassVar[str] = "json"


@dataclass(frozen=True)
class TextResult:
    text: str
    kind: ClassVar[str] = "text"

    @property
    def value(self) -> str:
        return self.text


@dataclass(frozen=True)
class EmptyResult:
    kind: ClassVar[str] = "empty"

    @property
    def value(self) -> str:
        return ""


ApiResult = Union[JsonResult, TextResult, EmptyResult]


def decode_body(content: bytes, logger=None) -> ApiResult:
    """Decode a successful response body.

    Gzip and JSON are both optional: a body that is not gzip compressed is
    used as is, and a body that is not JSON comes back as text.
    """
    if not content:
        return EmptyResult()

    try:
        content = gzip.decompress(content)
    except (OSError, EOFError, zlib.error) as e:
        if logger:
            logger.debug(f"response body is not gzip encoded: {e}")

    text = content.decode("utf-8", errors="replace")
    try:
        return JsonResult(json.loads(text))
    except ValueError as e:
        if logger:
            logger.debug(f"response body is not json: {e}")
    return TextResult(text)
