"""
High-level decoding of QRIS Merchant Presented Mode payloads.

``MpmDecoder`` wires the format gate, the TLV codec, the structural decoder
and the checksum module together and returns a ``QrisPayload``: the raw
records, the named field map and read-only views over them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from qrislink.config import DecoderSettings, get_settings
from qrislink.domain.additional_data import AdditionalData
from qrislink.domain.merchant import Merchant
from qrislink.domain.references import (
    Currency,
    CurrencyLookup,
    CurrencyTable,
    MccLookup,
    MccTable,
    MerchantCategory,
)
from qrislink.domain.transaction import Transaction
from qrislink.domain.types import PointOfInitiationMethod
from qrislink.exceptions import InvalidPayloadError
from qrislink.logging import create_logger
from qrislink.parsing.checksum import ChecksumRecord, checksum_record
from qrislink.parsing.schema import MPM_TAGS, TagNode
from qrislink.parsing.structured import FieldValue, leaf_value, to_field_map, to_plain_dict
from qrislink.parsing.tlv import TlvRecord, decode_tlv
from qrislink.parsing.validation import rejection_reason


@dataclass(frozen=True)
class QrisPayload:
    """
    A decoded payload.

    Attributes:
        raw: The payload string as given.
        records: Top-level TLV records in payload order.
        fields: Decoded field map keyed by schema name.
        checksum: Checksum extraction and validation result.
        currency: The transaction currency resolved from tag 53, if known.
        category: The merchant category resolved from tag 52, if known.
    """
    raw: str
    records: tuple[TlvRecord, ...]
    fields: Mapping[str, FieldValue]
    checksum: ChecksumRecord
    currency: Optional[Currency] = None
    category: Optional[MerchantCategory] = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def payload_format_indicator(self) -> str:
        return leaf_value(self.fields, "payload_format_indicator") or "01"

    @property
    def point_of_initiation_method(self) -> PointOfInitiationMethod:
        return PointOfInitiationMethod.from_raw(leaf_value(self.fields, "point_of_initiation_method"))

    @property
    def merchant_principal_visa(self) -> str:
        return leaf_value(self.fields, "merchant_principal_visa") or ""

    @property
    def merchant_principal_mastercard(self) -> str:
        return leaf_value(self.fields, "merchant_principal_mastercard") or ""

    @property
    def merchant(self) -> Merchant:
        return Merchant(self.fields)

    @property
    def transaction(self) -> Transaction:
        return Transaction(self.fields)

    @property
    def additional_data(self) -> AdditionalData:
        return AdditionalData(self.fields)

    def as_dict(self) -> dict[str, Any]:
        return {
            "payload_format_indicator": self.payload_format_indicator,
            "point_of_initiation_method": self.point_of_initiation_method.name.lower(),
            "merchant_principal_visa": self.merchant_principal_visa,
            "merchant_principal_mastercard": self.merchant_principal_mastercard,
            "currency": self.currency.model_dump() if self.currency else None,
            "mcc": self.category.model_dump() if self.category else None,
            "merchant": self.merchant.as_dict(),
            "transaction": self.transaction.as_dict(),
            "additional_data": self.additional_data.as_dict(),
            "crc": self.checksum.as_dict(),
            "fields": to_plain_dict(self.fields),
            "warnings": list(self.warnings),
            "qr_code": self.raw,
        }


class MpmDecoder:
    """
    Decoder for QRIS Merchant Presented Mode payloads.

    Collaborators are injected: the tag schema, the currency and MCC
    lookups, the settings and the logger. Defaults use the bundled schema
    and reference tables and the environment-driven settings.
    """

    def __init__(
        self,
        schema: Sequence[TagNode] = MPM_TAGS,
        currency_lookup: Optional[CurrencyLookup] = None,
        mcc_lookup: Optional[MccLookup] = None,
        settings: Optional[DecoderSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.schema = schema
        self.settings = settings or get_settings()
        self.currency_lookup = currency_lookup or CurrencyTable().get_by_numeric_code
        self.mcc_lookup = mcc_lookup or MccTable().get_by_code
        self.logger = logger or create_logger("qrislink", self.settings.log_ring_size)

    def is_acceptable(self, payload: Optional[str], strict: Optional[bool] = None) -> bool:
        strict = self.settings.strict_validation if strict is None else strict
        return rejection_reason(payload, strict=strict) is None

    def decode(self, payload: Optional[str], strict: Optional[bool] = None) -> QrisPayload:
        """
        Decode and describe a payload.

        Args:
            payload: The raw payload string.
            strict: Override ``settings.strict_validation`` for this call.

        Returns:
            The decoded ``QrisPayload``.

        Raises:
            InvalidPayloadError: If the payload is empty, fails the format
                gate, has unrecoverable TLV framing, or (when
                ``require_valid_checksum`` is set) fails checksum validation.
        """
        if not payload or payload == "null":
            raise InvalidPayloadError("QRIS data is null or empty")
        payload = payload.strip()
        strict = self.settings.strict_validation if strict is None else strict

        reason = rejection_reason(payload, strict=strict)
        if reason is not None:
            self.logger.info("Rejected payload: %s", reason, extra={"details": {"reason": reason, "strict": strict}})
            raise InvalidPayloadError(f"QRIS data is invalid: {reason}")

        try:
            records = decode_tlv(payload)
        except ValueError as exc:
            raise InvalidPayloadError(f"QRIS data is invalid: {exc}") from exc

        fields = to_field_map(records, self.schema)
        checksum = checksum_record(payload)
        warnings: list[str] = []
        if not checksum.verifiable:
            warnings.append("checksum_unverifiable")
        elif not checksum.is_valid:
            warnings.append("checksum_mismatch")
            self.logger.warning(
                "Checksum mismatch",
                extra={"details": {"embedded": checksum.embedded_value, "computed": checksum.computed_value}},
            )
        if self.settings.require_valid_checksum and not checksum.is_valid:
            raise InvalidPayloadError("QRIS data is invalid: checksum does not match")

        currency_code = leaf_value(fields, "transaction_currency") or self.settings.default_currency
        mcc = leaf_value(fields, "mcc")
        return QrisPayload(
            raw=payload,
            records=tuple(records),
            fields=fields,
            checksum=checksum,
            currency=self.currency_lookup(currency_code),
            category=self.mcc_lookup(mcc) if mcc else None,
            warnings=tuple(warnings),
        )
