import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.clock import SystemClock
from src.adapters.path_cache import PathCache
from src.adapters.sqlite.repos import SQLiteInvoiceRepo
from src.components.invoices import InvoiceConfig
from src.rules.loader import invoice_config, load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("INVOICES_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "invoices.db")
        self.migrations_dir = self.base_dir / "migrations"
        self.rules_path = Path(os.environ.get("INVOICES_RULES_PATH", self.base_dir / "rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_invoice_config(rules: Rules = Depends(get_rules)) -> InvoiceConfig:
    return invoice_config(rules)


# --- Repos ---
def get_invoice_repo(settings: Settings = Depends(get_settings)) -> SQLiteInvoiceRepo:
    return SQLiteInvoiceRepo(settings.db_path)


# View cache singleton shared by listing and mutation routes
_path_cache_instance: PathCache | None = None


def get_path_cache() -> PathCache:
    """Get view cache singleton."""
    global _path_cache_instance
    if _path_cache_instance is None:
        _path_cache_instance = PathCache()
    return _path_cache_instance


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance
