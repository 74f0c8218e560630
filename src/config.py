"""Ortam değişkenlerinden okunan uygulama ayarları."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _int_setting(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} tam sayı olmalı: {raw!r}") from None


@dataclass
class WarehouseConfig:
    data_file: str = "inventory.csv"
    log_file: str = "warehouse.log"
    log_level: str = "INFO"
    history_limit: int = 10

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> WarehouseConfig:
        """WAREHOUSE_* değişkenlerinden konfigürasyon oluşturur."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            data_file=env.get("WAREHOUSE_DATA_FILE", defaults.data_file),
            log_file=env.get("WAREHOUSE_LOG_FILE", defaults.log_file),
            log_level=env.get("WAREHOUSE_LOG_LEVEL", defaults.log_level).upper(),
            history_limit=_int_setting(env, "WAREHOUSE_HISTORY_LIMIT", defaults.history_limit),
        )
