from __future__ import annotations

import os
from dataclasses import dataclass

from src.domain.exceptions import ConfigurationError


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip() or None


def _env_float(name: str, default: float) -> float:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration for one tracked vessel.

    Env vars:
      - REPORT_MMSI: MMSI of the vessel, used for the AIS lookup and the report
      - MAPSHARE_ID: Garmin inReach MapShare identifier
      - MAPSHARE_PASSWORD: optional MapShare feed password
      - REPORT_SENDER: verified sender address of the report email
      - REPORT_RECEIVER: optional, defaults to MarineTraffic's report inbox
      - SAIS_HTTP_TIMEOUT_S: per request timeout (default 30)
      - SAIS_SYNC_INTERVAL_S: pause between worker cycles (default 900)
      - SAIS_LOOP: keep the worker running (default false)
    """

    vessel_id: str | None = None
    mapshare_id: str | None = None
    mapshare_password: str | None = None
    report_sender: str | None = None
    report_receiver: str | None = None
    http_timeout_s: float = 30.0
    sync_interval_s: float = 900.0
    loop: bool = False

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            vessel_id=_env_str("REPORT_MMSI"),
            mapshare_id=_env_str("MAPSHARE_ID"),
            mapshare_password=_env_str("MAPSHARE_PASSWORD"),
            report_sender=_env_str("REPORT_SENDER"),
            report_receiver=_env_str("REPORT_RECEIVER"),
            http_timeout_s=_env_float("SAIS_HTTP_TIMEOUT_S", 30.0),
            sync_interval_s=_env_float("SAIS_SYNC_INTERVAL_S", 900.0),
            loop=env_bool("SAIS_LOOP", False),
        )

    def require_vessel_id(self) -> str:
        if not self.vessel_id:
            raise ConfigurationError("REPORT_MMSI environment variable is missing.")
        return self.vessel_id

    def require_mapshare_id(self) -> str:
        if not self.mapshare_id:
            raise ConfigurationError("MAPSHARE_ID environment variable is missing.")
        return self.mapshare_id

    def require_report_sender(self) -> str:
        if not self.report_sender:
            raise ConfigurationError("REPORT_SENDER environment variable is missing.")
        return self.report_sender

    def validate(self) -> "Settings":
        """Fail fast at startup; each setting is checked again where it is used."""

        self.require_vessel_id()
        self.require_mapshare_id()
        self.require_report_sender()
        return self
