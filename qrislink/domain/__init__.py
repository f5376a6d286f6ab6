"""
This package defines the domain views over decoded QRIS payloads: the
merchant, the transaction and its tip, the additional data template, the
reference tables and the ``MpmDecoder`` facade that ties them together.
"""
from qrislink.domain.additional_data import AdditionalData
from qrislink.domain.merchant import Merchant, MerchantInformation, MerchantLocation
from qrislink.domain.payload import MpmDecoder, QrisPayload
from qrislink.domain.references import Currency, CurrencyTable, MccTable, MerchantCategory
from qrislink.domain.transaction import Transaction
from qrislink.domain.types import MerchantCriteria, PanMerchantMethod, PointOfInitiationMethod, TipIndicator

__all__ = [
    "AdditionalData",
    "Currency",
    "CurrencyTable",
    "MccTable",
    "Merchant",
    "MerchantCategory",
    "MerchantCriteria",
    "MerchantInformation",
    "MerchantLocation",
    "MpmDecoder",
    "PanMerchantMethod",
    "PointOfInitiationMethod",
    "QrisPayload",
    "TipIndicator",
    "Transaction",
]
