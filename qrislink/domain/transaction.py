"""
Transaction amount and tip calculation over a decoded QRIS field map.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from qrislink.domain.types import TipIndicator
from qrislink.parsing.structured import FieldValue, leaf_value


def parse_amount(raw: Optional[str]) -> Decimal:
    """Parse a QRIS amount string, treating missing or unparsable values as zero."""
    if not raw:
        return Decimal(0)
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        return Decimal(0)


@dataclass(frozen=True)
class Transaction:
    fields: Mapping[str, FieldValue]

    @property
    def tip_indicator(self) -> TipIndicator:
        return TipIndicator.from_raw(leaf_value(self.fields, "tip_indicator"))

    @property
    def amount(self) -> Decimal:
        return parse_amount(leaf_value(self.fields, "transaction_amount"))

    @property
    def fixed_tip_amount(self) -> Decimal:
        return parse_amount(leaf_value(self.fields, "fixed_tip_amount"))

    @property
    def percentage_tip_amount(self) -> Decimal:
        return parse_amount(leaf_value(self.fields, "percentage_tip_amount"))

    @property
    def tip_calculated(self) -> Optional[Decimal]:
        """
        The tip implied by the payload.

        Fixed tips return the fixed amount, percentage tips return
        ``amount * percentage / 100``. Customer-entered tips and payloads
        without a tip return ``None``.
        """
        indicator = self.tip_indicator
        if indicator is TipIndicator.FIXED_AMOUNT:
            return self.fixed_tip_amount
        if indicator is TipIndicator.FIXED_PERCENTAGE:
            return self.amount * self.percentage_tip_amount / 100
        return None

    @property
    def total(self) -> Decimal:
        return self.amount + (self.tip_calculated or Decimal(0))

    def as_dict(self) -> dict[str, Any]:
        indicator = self.tip_indicator
        data: dict[str, Any] = {
            "tip_indicator_raw": indicator.value,
            "tip_indicator": indicator.label,
            "transaction_amount": str(self.amount),
        }
        if indicator is TipIndicator.FIXED_AMOUNT:
            data["fixed_tip_amount"] = str(self.fixed_tip_amount)
        if indicator is TipIndicator.FIXED_PERCENTAGE:
            data["percentage_tip_amount"] = str(self.percentage_tip_amount)
        tip = self.tip_calculated
        data["tip_calculated"] = str(tip) if tip is not None else None
        return data
