from qrislink.resources.loader import load_currency_data, load_mcc_data

__all__ = ["load_currency_data", "load_mcc_data"]
