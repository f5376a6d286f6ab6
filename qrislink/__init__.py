from importlib.metadata import PackageNotFoundError, version

from qrislink.config import DecoderSettings, get_settings
from qrislink.domain import MpmDecoder, QrisPayload
from qrislink.exceptions import InvalidPayloadError, MalformedTlvError, QrisError
from qrislink.parsing import (
    TlvRecord,
    compute_checksum,
    decode_structured,
    decode_tlv,
    encode_structured,
    encode_tlv,
    is_acceptable_payload,
    is_checksum_valid,
    sign_payload,
)

__all__ = [
    "DecoderSettings",
    "InvalidPayloadError",
    "MalformedTlvError",
    "MpmDecoder",
    "QrisError",
    "QrisPayload",
    "TlvRecord",
    "compute_checksum",
    "decode_structured",
    "decode_tlv",
    "encode_structured",
    "encode_tlv",
    "get_settings",
    "is_acceptable_payload",
    "is_checksum_valid",
    "sign_payload",
]

try:
    __version__ = version("qrislink")
except PackageNotFoundError:
    __version__ = "0.0.0"
