"""
Merchant view over a decoded QRIS field map.

QRIS payloads may carry up to four merchant account templates (tags 26, 27,
50 and 51). Tag 26-style templates carry the acquirer's domestic PAN; tag 51
carries the national merchant ID (NMID) issued by the QRIS scheme.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from qrislink.domain.types import MerchantCriteria, PanMerchantMethod
from qrislink.parsing.schema import MERCHANT_INFORMATION_TAGS
from qrislink.parsing.structured import Composite, FieldValue, composite_value, leaf_value
from qrislink.utils.luhn import is_luhn_valid
from qrislink.utils.text import is_ascii_digits

# Prefixes stripped from the global unique identifier to get a display name.
_ACQUIRER_PREFIXES: tuple[str, ...] = (
    "ID.", "COM.", "CO.", "QRIS.", "ORG.", "BANK.", "MERCHANT.", "GOV.", "IND.",
    "IN.", "COMMERCE.", "PT.", "MY.", "SG.", "KR.", "CN.", "JP.", "TH.",
)
_WWW_SUFFIX_RE = re.compile(r"\.[wW]{3}$")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9\s]")


@dataclass(frozen=True)
class MerchantInformation:
    global_unique_identifier: Optional[str] = None
    merchant_pan: Optional[str] = None
    merchant_id: Optional[str] = None
    merchant_criteria: Optional[MerchantCriteria] = None

    @classmethod
    def from_composite(cls, value: Composite) -> "MerchantInformation":
        criteria = value.get("merchant_criteria")
        return cls(
            global_unique_identifier=value.get("global_unique_identifier"),
            merchant_pan=value.get("merchant_pan"),
            merchant_id=value.get("merchant_id"),
            merchant_criteria=MerchantCriteria.from_raw(criteria) if criteria is not None else None,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "global_unique_identifier": self.global_unique_identifier,
            "merchant_pan": self.merchant_pan,
            "merchant_id": self.merchant_id,
            "merchant_criteria": self.merchant_criteria.value if self.merchant_criteria else None,
        }


@dataclass(frozen=True)
class MerchantLocation:
    city: str = ""
    country_code: str = ""
    postal_code: str = ""

    def __str__(self) -> str:
        return f"{self.city}, {self.country_code}, {self.postal_code}"

    def as_dict(self) -> dict[str, str]:
        return {"city": self.city, "country_code": self.country_code, "postal_code": self.postal_code}


@dataclass(frozen=True)
class Merchant:
    """
    Read-only merchant accessors projected from a field map.

    Attributes:
        fields: The decoded field map.
    """
    fields: Mapping[str, FieldValue]

    def _templates(self) -> list[Composite]:
        templates = []
        for tag_id in MERCHANT_INFORMATION_TAGS:
            template = composite_value(self.fields, f"merchant_information_{tag_id}")
            if template is not None:
                templates.append(template)
        return templates

    def _first(self, sub_field: str) -> Optional[str]:
        for template in self._templates():
            value = template.get(sub_field)
            if value is not None:
                return value
        return None

    @property
    def pan(self) -> str:
        """Merchant PAN from the first template that carries one, else ``""``."""
        return self._first("merchant_pan") or ""

    @property
    def merchant_id(self) -> str:
        return self._first("merchant_id") or ""

    @property
    def national_merchant_id(self) -> str:
        template = composite_value(self.fields, "merchant_information_51")
        if template is None:
            return ""
        return template.get("merchant_id") or ""

    @property
    def issuer_nns(self) -> str:
        """National Numbering System prefix of the PAN (first 8 digits)."""
        pan = self.pan
        return pan[:8] if len(pan) >= 8 else ""

    @property
    def institution_code(self) -> str:
        nns = self.issuer_nns
        return nns[4:8] if nns else "0000"

    @property
    def merchant_sequence(self) -> Optional[str]:
        pan = self.pan
        if len(pan) > 9:
            return pan[8:-1]
        return None

    @property
    def check_digit(self) -> Optional[int]:
        pan = self.pan
        if pan and is_ascii_digits(pan[-1]):
            return int(pan[-1])
        return None

    @property
    def pan_merchant_method(self) -> PanMerchantMethod:
        pan = self.pan
        if len(pan) >= 9:
            return PanMerchantMethod.from_digit(pan[8])
        return PanMerchantMethod.UNSPECIFIED

    @property
    def merchant_criteria(self) -> MerchantCriteria:
        return MerchantCriteria.from_raw(self._first("merchant_criteria"))

    @property
    def name(self) -> str:
        return leaf_value(self.fields, "merchant_name") or ""

    @property
    def location(self) -> MerchantLocation:
        return MerchantLocation(
            city=leaf_value(self.fields, "merchant_city") or "",
            country_code=leaf_value(self.fields, "country_code") or "",
            postal_code=leaf_value(self.fields, "merchant_postal_code") or "",
        )

    @property
    def acquirer_name(self) -> str:
        raw = ""
        for key in ("merchant_information_26", "merchant_information_51"):
            template = composite_value(self.fields, key)
            if template is not None and template.get("global_unique_identifier"):
                raw = template["global_unique_identifier"]
                break
        for prefix in _ACQUIRER_PREFIXES:
            raw = raw.replace(prefix, "")
        raw = _WWW_SUFFIX_RE.sub("", raw)
        raw = raw.replace("BANK", "BANK ")
        raw = _NON_ALNUM_RE.sub("", raw)
        return raw.strip()

    @property
    def informations(self) -> dict[int, MerchantInformation]:
        result: dict[int, MerchantInformation] = {}
        for tag_id in MERCHANT_INFORMATION_TAGS:
            template = composite_value(self.fields, f"merchant_information_{tag_id}")
            if template is not None:
                result[int(tag_id)] = MerchantInformation.from_composite(template)
        return result

    def is_pan_valid(self) -> bool:
        """Luhn check over the merchant PAN; ``False`` when there is no PAN."""
        return is_luhn_valid(self.pan)

    def as_dict(self) -> dict[str, Any]:
        return {
            "merchant_pan": self.pan,
            "merchant_pan_valid": self.is_pan_valid(),
            "merchant_sequence": self.merchant_sequence,
            "merchant_check_digit": self.check_digit,
            "merchant_id": self.merchant_id,
            "pan_merchant_method": self.pan_merchant_method.payment_method_code,
            "national_merchant_id": self.national_merchant_id,
            "issuer_nns": self.issuer_nns,
            "merchant_criteria": self.merchant_criteria.value,
            "merchant_name": self.name,
            "merchant_location": self.location.as_dict(),
            "institution_code": self.institution_code,
            "acquirer_name": self.acquirer_name,
            "merchant_information": {str(k): v.as_dict() for k, v in self.informations.items()},
        }
