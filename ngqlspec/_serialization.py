"""JSON encoding backed by msgspec."""

from typing import Any

import msgspec

__all__ = ("encode_json",)

_encoder = msgspec.json.Encoder(enc_hook=str)


def encode_json(data: Any) -> str:
    """Encode data to a JSON string.

    Objects msgspec cannot encode natively are rendered with ``str()``.
    """
    return _encoder.encode(data).decode("utf-8")
