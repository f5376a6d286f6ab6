"""
Enumerations for coded QRIS field values.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from qrislink.utils.text import is_ascii_digits


class PointOfInitiationMethod(str, Enum):
    """Tag 01: whether the code is reusable (static) or per-transaction (dynamic)."""
    STATIC = "11"
    DYNAMIC = "12"
    UNKNOWN = ""

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "PointOfInitiationMethod":
        for member in (cls.STATIC, cls.DYNAMIC):
            if member.value == raw:
                return member
        return cls.UNKNOWN

    @property
    def is_static(self) -> bool:
        return self is PointOfInitiationMethod.STATIC

    @property
    def is_dynamic(self) -> bool:
        return self is PointOfInitiationMethod.DYNAMIC


class TipIndicator(str, Enum):
    """Tag 55: how a tip or convenience fee is applied."""
    INPUT_TIP = "01"
    FIXED_AMOUNT = "02"
    FIXED_PERCENTAGE = "03"
    NO_TIP = ""

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "TipIndicator":
        for member in (cls.INPUT_TIP, cls.FIXED_AMOUNT, cls.FIXED_PERCENTAGE):
            if member.value == raw:
                return member
        return cls.NO_TIP

    @property
    def label(self) -> str:
        return "" if self is TipIndicator.NO_TIP else self.name


class MerchantCriteria(str, Enum):
    """
    Merchant size class carried in sub-tag 03 of the merchant account templates.

    Each class determines the merchant discount rate (MDR) in percent.
    """
    MICRO = "UMI"
    SMALL = "UKE"
    MEDIUM = "UME"
    LARGE = "UBE"
    REGULAR = "URE"

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "MerchantCriteria":
        try:
            return cls(raw)
        except ValueError:
            return cls.REGULAR

    @property
    def mdr_percentage(self) -> float:
        return _MDR_PERCENTAGES.get(self.value, 0.0)


_MDR_PERCENTAGES: dict[str, float] = {
    "UMI": 0.3,
    "UKE": 0.7,
    "UME": 0.7,
    "UBE": 0.7,
}


class PanMerchantMethod(int, Enum):
    """Payment method encoded in the 9th digit of the merchant PAN."""
    UNSPECIFIED = 0
    DEBIT = 1
    CREDIT = 2
    ELECTRONIC_MONEY = 3
    RFU = 9

    @classmethod
    def from_digit(cls, digit: Optional[str]) -> "PanMerchantMethod":
        if digit is None or not is_ascii_digits(digit):
            return cls.UNSPECIFIED
        code = int(digit)
        if code >= 4:
            return cls.RFU
        return cls(code)

    @property
    def payment_method_code(self) -> int:
        return 0 if self is PanMerchantMethod.RFU else self.value
