"""Konfigürasyon testleri."""

import pytest

from src.config import WarehouseConfig


class TestFromEnv:
    def test_defaults(self):
        config = WarehouseConfig.from_env({})
        assert config == WarehouseConfig()
        assert config.data_file == "inventory.csv"
        assert config.history_limit == 10

    def test_overrides(self):
        config = WarehouseConfig.from_env({
            "WAREHOUSE_DATA_FILE": "/tmp/stock.csv",
            "WAREHOUSE_LOG_FILE": "/tmp/stock.log",
            "WAREHOUSE_LOG_LEVEL": "debug",
            "WAREHOUSE_HISTORY_LIMIT": "25",
        })
        assert config.data_file == "/tmp/stock.csv"
        assert config.log_file == "/tmp/stock.log"
        assert config.log_level == "DEBUG"
        assert config.history_limit == 25

    def test_invalid_history_limit(self):
        with pytest.raises(ValueError):
            WarehouseConfig.from_env({"WAREHOUSE_HISTORY_LIMIT": "many"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("WAREHOUSE_DATA_FILE", "from-env.csv")
        assert WarehouseConfig.from_env().data_file == "from-env.csv"
