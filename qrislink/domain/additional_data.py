"""
Accessors for the additional data template (tag 62).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from qrislink.parsing.schema import ADDITIONAL_DATA
from qrislink.parsing.structured import FieldValue, composite_value


@dataclass(frozen=True)
class AdditionalData:
    fields: Mapping[str, FieldValue]

    def get(self, name: str) -> str:
        """Sub-field value by name, ``""`` when absent."""
        template = composite_value(self.fields, ADDITIONAL_DATA.name)
        if template is None:
            return ""
        return template.get(name) or ""

    @property
    def billing_ide(self) -> str:
        return self.get("billing_ide")

    @property
    def bill_number(self) -> str:
        return self.get("bill_number")

    @property
    def mobile_number(self) -> str:
        return self.get("mobile_number")

    @property
    def store_label(self) -> str:
        return self.get("store_label")

    @property
    def loyalty_number(self) -> str:
        return self.get("loyalty_number")

    @property
    def reference_label(self) -> str:
        return self.get("reference_label")

    @property
    def customer_label(self) -> str:
        return self.get("customer_label")

    @property
    def terminal_label(self) -> str:
        return self.get("terminal_label")

    @property
    def purpose_of_transaction(self) -> str:
        return self.get("purpose_of_transaction")

    @property
    def additional_consumer_data(self) -> str:
        return self.get("additional_consumer_data")

    @property
    def merchant_tax_id(self) -> str:
        return self.get("merchant_tax_id")

    @property
    def merchant_channel(self) -> str:
        return self.get("merchant_channel")

    @property
    def extra_data(self) -> str:
        return self.get("extra_data")

    def as_dict(self) -> dict[str, str]:
        return {child.name: self.get(child.name) for child in ADDITIONAL_DATA.children}
