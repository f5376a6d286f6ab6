from __future__ import annotations


CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def crc16_ccitt_false(data: bytes) -> int:
    """CRC-16/CCITT-FALSE (a.k.a. CRC-16/IBM-3740): poly 0x1021, init 0xFFFF, no reflection, no final XOR."""
    crc = CRC16_INIT
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ CRC16_POLY
            else:
                crc <<= 1
            crc &= 0xFFFF
    return crc


def crc16_hex(text: str) -> str:
    """Checksum of the UTF-8 encoding of ``text`` as 4 uppercase hex digits."""
    return f"{crc16_ccitt_false(text.encode('utf-8')):04X}"
