"""Plain-data and JSON encoding for offsets and ranges."""

from strindex.serde.codec import (
    RANGE_FIELDS,
    TEXT_SIZE_TAG,
    decode_range,
    decode_range_fields,
    decode_size,
    encode_range,
    encode_size,
)
from strindex.serde.json_codec import dumps_range, dumps_size, loads_range, loads_size
from strindex.serde.options import CodecOptions, RangeForm

__all__ = [
    "RANGE_FIELDS",
    "TEXT_SIZE_TAG",
    "CodecOptions",
    "RangeForm",
    "decode_range",
    "decode_range_fields",
    "decode_size",
    "dumps_range",
    "dumps_size",
    "encode_range",
    "encode_size",
    "loads_range",
    "loads_size",
]
