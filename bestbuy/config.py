"""Client configuration via environment variables.

Library code never reads the environment on its own. The embedding
application loads settings once at start-up and hands them to the client:

    settings = load_settings()
    client = Client(ClientConfig.from_settings(settings))

Security considerations:
- api_key: Store securely, never commit to version control
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BBY_",
        extra="ignore",
    )

    # Best Buy developer API key (BBY_API_KEY)
    api_key: str | None = None

    # Log every request at INFO instead of DEBUG (BBY_DEBUG)
    debug: bool = False


def load_settings(**overrides) -> Settings:
    """Load settings from the environment and `.env`, applying overrides."""
    return Settings(**overrides)
