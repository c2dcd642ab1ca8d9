"""Scheme constants and app settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator


class SchemeConfig(BaseModel):
    """Fixed rules of the Sukanya Samriddhi Yojana scheme.

    Investment bounds are yearly amounts; the form collects a monthly figure.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    deposit_period_years: int = Field(default=15, ge=1)
    maturity_period_years: int = Field(default=21, ge=1)
    interest_rate: float = Field(default=0.082, ge=0)
    min_investment: float = Field(default=250, ge=0)
    max_investment: float = Field(default=150000, ge=0)
    min_girl_age: int = Field(default=0, ge=0)
    max_girl_age: int = Field(default=10, ge=0)
    min_withdrawal_age: int = Field(default=18, ge=0)
    withdrawal_limit_fraction: float = Field(default=0.5, gt=0, le=1)

    @model_validator(mode="after")
    def ensure_validity(self) -> "SchemeConfig":
        if self.deposit_period_years > self.maturity_period_years:
            raise ValueError("deposit_period_years cannot exceed maturity_period_years")
        if self.min_investment > self.max_investment:
            raise ValueError("min_investment must not exceed max_investment")
        if self.min_girl_age > self.max_girl_age:
            raise ValueError("min_girl_age must not exceed max_girl_age")
        return self

    @property
    def monthly_max(self) -> float:
        return self.max_investment / 12

    def contribution_for_year(self, year: int, amount: float) -> float:
        """Contributions are only accepted during the deposit period."""
        return amount if year <= self.deposit_period_years else 0.0


DEFAULT_SCHEME = SchemeConfig()

# starting values of the calculator form
DEFAULT_INPUTS: Dict[str, Any] = {
    "monthlyInvestment": 4000,
    "girlAge": 1,
    "isWithdrawalEnabled": False,
    "withdrawalAge": 18,
    "withdrawalAmount": 100000,
}

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
]


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    scheme: SchemeConfig = DEFAULT_SCHEME


def _deep_get(d: Dict[str, Any], path: str, default=None):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _env_or_cfg(cfg: Dict[str, Any], key: str, cfg_path: str, default):
    # empty env vars count as "not set"
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return _deep_get(cfg, cfg_path, default)
    return value.strip()


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Loads config.yaml (or $SSY_CONFIG) + overrides from .env/environment variables.
    """
    load_dotenv()

    path = config_path or os.getenv("SSY_CONFIG") or "config.yaml"
    cfg: Dict[str, Any] = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
        if not isinstance(cfg, dict):
            raise ValueError(f"{path}: top level of the config file must be a mapping")

    env = _env_or_cfg(cfg, "APP_ENV", "app.env", "dev")
    log_level = _env_or_cfg(cfg, "LOG_LEVEL", "app.log_level", "INFO")

    origins = _env_or_cfg(cfg, "CORS_ORIGINS", "app.cors_origins", DEFAULT_CORS_ORIGINS)
    if isinstance(origins, str):
        origins = [o.strip() for o in origins.split(",") if o.strip()]

    scheme = SchemeConfig.model_validate(cfg.get("scheme") or {})

    return Settings(
        env=str(env),
        log_level=str(log_level).upper(),
        cors_origins=list(origins),
        scheme=scheme,
    )
