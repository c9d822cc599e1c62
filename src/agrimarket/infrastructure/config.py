"""Runtime settings, read from ``AGRIMARKET_*`` environment variables.

    AGRIMARKET_DATA_DIR=/var/lib/agrimarket
    AGRIMARKET_MISSING_PRODUCT_POLICY=fail
    AGRIMARKET_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from agrimarket.domain.service.stock_reconciliation_service import MissingProductPolicy

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGRIMARKET_", extra="ignore")

    DATA_DIR: Path = _DEFAULT_DATA_DIR
    MISSING_PRODUCT_POLICY: MissingProductPolicy = MissingProductPolicy.SKIP
    LOG_LEVEL: str = "INFO"
