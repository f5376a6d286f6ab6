import pytest

from qrislink.config import get_settings

BNI_PAYLOAD = (
    "00020101021126590013ID.CO.BNI.WWW011893600009150305256502096102070790303UBE"
    "51440014ID.CO.QRIS.WWW0215ID20222337822690303UBE5204472253033605802ID"
    "5912VFS GLOBAL 66015JAKARTA SELATAN61051294062070703A016304D7C5"
)

MANDIRI_PAYLOAD = (
    "00020101021126690021ID.CO.BANKMANDIRI.WWW01189360000801688405040211716884050410303UMI"
    "51440014ID.CO.QRIS.WWW0215ID10243580827810303UMI5204274153033605802ID"
    "5910kedai  all6015Tangerang (Kab)61051533862070703A0163041A47"
)


@pytest.fixture
def bni_payload() -> str:
    return BNI_PAYLOAD


@pytest.fixture
def mandiri_payload() -> str:
    return MANDIRI_PAYLOAD


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # Keep a developer's .env or QRIS_* variables out of the tests.
    monkeypatch.chdir(tmp_path)
    for name in ("QRIS_STRICT_VALIDATION", "QRIS_REQUIRE_VALID_CRC", "QRIS_DEFAULT_CURRENCY", "LOG_RING_SIZE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
