"""
Reference data used to describe decoded payloads: ISO 4217 currencies and
merchant category codes (MCC).

The tables are read-only and loaded from bundled JSON once. Decoders receive
their lookups as plain callables, so callers can pass their own tables.
"""
from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qrislink.resources import load_currency_data, load_mcc_data
from qrislink.utils.text import is_ascii_digits


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=3, max_length=3)
    num_code: str = Field(pattern=r"^[0-9]{3}$")
    digits: int = Field(ge=0)
    name: str
    locations: tuple[str, ...] = ()


class MerchantCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    mcc: str = Field(pattern=r"^[0-9]{4}$")
    edited_description: str = ""
    combined_description: str = ""
    usda_description: str = ""
    irs_description: str = ""
    irs_reportable: str = ""

    @field_validator("irs_reportable", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or ""


CurrencyLookup = Callable[[str], Optional[Currency]]
MccLookup = Callable[[str], Optional[MerchantCategory]]


class CurrencyTable:
    """
    Read-only ISO 4217 table.

    Provides lookup by 3-digit numeric code (as used in tag 53) and by
    alphabetic code.
    """

    def __init__(self, records: Optional[list[dict]] = None) -> None:
        rows = records if records is not None else load_currency_data()
        currencies = [Currency.model_validate(row) for row in rows]
        self._by_num: dict[str, Currency] = {c.num_code: c for c in currencies}
        self._by_code: dict[str, Currency] = {c.code: c for c in currencies}

    def get_by_numeric_code(self, num_code: str) -> Optional[Currency]:
        """
        Look up a currency by its numeric code.

        Args:
            num_code: The numeric code, e.g. ``"360"``. Shorter codes are
                zero-padded (``"36"`` -> ``"036"``).

        Returns:
            The ``Currency`` if found, otherwise ``None``.
        """
        if not num_code or not is_ascii_digits(num_code.strip()):
            return None
        return self._by_num.get(num_code.strip().zfill(3))

    def get_by_code(self, code: str) -> Optional[Currency]:
        return self._by_code.get(code.strip().upper())

    def all(self) -> list[Currency]:
        return sorted(self._by_code.values(), key=lambda c: c.code)

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, item: str) -> bool:
        return item in self._by_num or item.upper() in self._by_code


class MccTable:
    """Read-only merchant category code table."""

    def __init__(self, records: Optional[list[dict]] = None) -> None:
        rows = records if records is not None else load_mcc_data()
        self._by_code: dict[str, MerchantCategory] = {}
        for row in rows:
            category = MerchantCategory.model_validate(row)
            self._by_code[category.mcc] = category

    def get_by_code(self, mcc: str) -> Optional[MerchantCategory]:
        if not mcc:
            return None
        return self._by_code.get(mcc.strip())

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, item: str) -> bool:
        return item in self._by_code
