from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class DecoderSettings(BaseSettings):
    strict_validation: bool = Field(False, validation_alias="QRIS_STRICT_VALIDATION")
    require_valid_checksum: bool = Field(False, validation_alias="QRIS_REQUIRE_VALID_CRC")

    # ISO 4217 numeric code assumed when tag 53 is missing (IDR).
    default_currency: str = Field("360", validation_alias="QRIS_DEFAULT_CURRENCY")

    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
