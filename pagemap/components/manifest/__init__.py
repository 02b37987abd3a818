"""
Manifest package.
"""

from .manifest_codec_comp import (
    CACHE_FORMAT_VERSION,
    decode_manifest,
    decode_record,
    encode_manifest,
    read_manifest_cache,
    write_manifest_cache,
)
from .manifest_summary_comp import summarize_manifest

__all__ = [
    "CACHE_FORMAT_VERSION",
    "decode_manifest",
    "decode_record",
    "encode_manifest",
    "read_manifest_cache",
    "summarize_manifest",
    "write_manifest_cache",
]
