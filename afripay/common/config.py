"""Environment-driven settings holding provider secrets.

Settings are loaded per checkout call (or injected by the caller), never kept
as a process-wide singleton. Variable names are listed in `.env.example`.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class AfripaySettings(BaseSettings):
    """Typed view of provider credentials from environment variables."""

    log_level: str = "INFO"
    wave_api_key: str | None = None
    om_client_id: str | None = None
    om_client_secret: str | None = None
    om_callback_url: str | None = None
    paydunya_master_key: str | None = None
    paydunya_private_key: str | None = None
    paydunya_token: str | None = None
    paytech_api_key: str | None = None
    paytech_api_secret: str | None = None
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def load_settings() -> AfripaySettings:
    """Read a fresh settings snapshot from the environment."""

    return AfripaySettings()
