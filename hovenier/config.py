# hovenier/config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

D = Decimal


class EngineSettings(BaseSettings):
    # === Algemene app settings ===
    app_env: str = "local"  # local | development | production

    # === Tarieven ===
    uurtarief: Decimal = Field(D("45.00"), description="Uurtarief arbeid (EUR, ex btw)")
    standaard_marge_percentage: Decimal = D("20")
    btw_percentage: Decimal = D("21")
    offerte_overhead: Decimal = Field(D("200.00"), description="Vaste voorbereidingskosten per offerte")

    # === Planning ===
    team_grootte: int = 2
    effectieve_uren_per_dag: Decimal = D("6")
    buffer_percentage: Decimal = Field(D("10"), description="Weerbuffer op doorlooptijd")

    # === Heggen ===
    hoogte_drempel_m: Decimal = D("2")
    hoogte_toeslag_factor: Decimal = D("1.3")

    # === Nacalculatie ===
    deviation_good_pct: Decimal = D("5")
    deviation_warning_pct: Decimal = D("15")

    # === Referentiedata ===
    reference_dir: Optional[str] = None  # None = meegeleverde YAML tabellen

    # === Logging ===
    log_level: str = "INFO"

    # === Server ===
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="HOVENIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> EngineSettings:
    settings = EngineSettings()

    # Omgeving-specifieke overrides
    if settings.app_env == "development":
        settings.log_level = "DEBUG"
    elif settings.app_env == "production":
        settings.log_level = "WARNING"

    return settings


@dataclass(frozen=True)
class CalculationConfig:
    """
    Eén expliciete configuratie per berekening.

    Wordt één keer opgebouwd (uit settings + eventuele overrides van de aanroeper)
    en daarna ongewijzigd doorgegeven aan calculators, aggregator en planning.

    Defaults:
      uurtarief              45.00 EUR
      marge_percentage       20 %
      btw_percentage         21 %
      team_grootte           2 (toegestaan 2-4)
      effectieve_uren        6 per medewerker per dag
      buffer_percentage      10 % weerbuffer op doorlooptijd
      hoogte_drempel_m       2 m, daarboven hoogte_toeslag 1.3
      deviation good/warning 5 % / 15 %
    """

    uurtarief: D = D("45.00")
    marge_percentage: D = D("20")
    btw_percentage: D = D("21")
    offerte_overhead: D = D("200.00")
    team_grootte: int = 2
    effectieve_uren_per_dag: D = D("6")
    buffer_percentage: D = D("10")
    hoogte_drempel_m: D = D("2")
    hoogte_toeslag_factor: D = D("1.3")
    deviation_good_pct: D = D("5")
    deviation_warning_pct: D = D("15")

    def __post_init__(self) -> None:
        if self.team_grootte not in (2, 3, 4):
            raise ValueError(f"team_grootte must be 2, 3 or 4 (got {self.team_grootte})")
        if self.uurtarief < 0:
            raise ValueError("uurtarief must be >= 0")

    @classmethod
    def from_settings(cls, settings: Optional[EngineSettings] = None, **overrides: Any) -> "CalculationConfig":
        s = settings or get_settings()
        base = cls(
            uurtarief=D(str(s.uurtarief)),
            marge_percentage=D(str(s.standaard_marge_percentage)),
            btw_percentage=D(str(s.btw_percentage)),
            offerte_overhead=D(str(s.offerte_overhead)),
            team_grootte=int(s.team_grootte),
            effectieve_uren_per_dag=D(str(s.effectieve_uren_per_dag)),
            buffer_percentage=D(str(s.buffer_percentage)),
            hoogte_drempel_m=D(str(s.hoogte_drempel_m)),
            hoogte_toeslag_factor=D(str(s.hoogte_toeslag_factor)),
            deviation_good_pct=D(str(s.deviation_good_pct)),
            deviation_warning_pct=D(str(s.deviation_warning_pct)),
        )
        # None = "niet opgegeven", dus default houden
        clean = {k: v for k, v in overrides.items() if v is not None}
        return replace(base, **clean) if clean else base

    @property
    def team_capaciteit_per_dag(self) -> D:
        return D(self.team_grootte) * self.effectieve_uren_per_dag
