"""Exporter configuration: sink specs, dedup tuning and service knobs."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "EXPORTER_"}

    # Sinks, e.g. ["log", "alertmanager:http://alertmanager:9093/api/v1/alerts?cluster=prod"]
    sinks: list[str] = ["log"]
    export_timeout_seconds: float = 20.0

    # Alert dedup
    dedup_window_seconds: int = 300
    dedup_max_entries: int = 500
    redis_url: str = ""

    # Telemetry
    log_level: str = "INFO"
    otlp_endpoint: str = ""

    # Exporter server
    host: str = "0.0.0.0"
    port: int = 8082


settings = Settings()
