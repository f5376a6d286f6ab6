from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any


def _load_json(filename: str) -> Any:
    resource = resources.files("qrislink.resources").joinpath(filename)
    with resource.open("r", encoding="utf-8") as f:
        return json.load(f)


@lru_cache
def load_currency_data() -> tuple[dict[str, Any], ...]:
    return tuple(_load_json("iso4217.json"))


@lru_cache
def load_mcc_data() -> tuple[dict[str, Any], ...]:
    return tuple(_load_json("mcc.json"))
