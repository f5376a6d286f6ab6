from qrislink.core.crc import CRC16_INIT, CRC16_POLY, crc16_ccitt_false, crc16_hex

__all__ = ["CRC16_INIT", "CRC16_POLY", "crc16_ccitt_false", "crc16_hex"]
