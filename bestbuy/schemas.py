"""Pydantic models for client configuration and response shaping."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bestbuy import __version__
from bestbuy.config import Settings

USER_AGENT = f"bestbuy-sdk-python/{__version__}"


class ResponseParameters(BaseModel):
    """Querystring controls applied uniformly across endpoints."""

    model_config = ConfigDict(validate_assignment=True)

    api_key: str = Field(
        "",
        description="API key, written by the client right before formatting",
    )
    format: str = Field(
        "json",
        description="Response format; cleared for single-resource lookups",
    )
    facets: str | None = Field(
        None,
        description="Attribute(s) to aggregate results by",
        json_schema_extra={"example": "manufacturer,5"},
    )
    page: int = Field(0, ge=0, description="Result page (0 means unset)")
    page_size: int = Field(
        0, ge=0, description="Results per page (0 means unset)"
    )
    show: str | None = Field(
        None,
        description="Comma-separated attributes to return",
        json_schema_extra={"example": "sku,name,salePrice"},
    )
    sort: str | None = Field(
        None,
        description="Sort expression",
        json_schema_extra={"example": "salePrice.asc"},
    )


class ClientConfig(BaseModel):
    """Settings shared by every request a client makes."""

    api_key: str | None = Field(None, description="Best Buy developer API key")
    debug: bool = Field(False, description="Log requests at INFO level")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra HTTP headers for each request"
    )

    @model_validator(mode="after")
    def _default_headers(self) -> "ClientConfig":
        # Caller-supplied headers of the same name take precedence
        if not any(name.lower() == "user-agent" for name in self.headers):
            self.headers = {"User-Agent": USER_AGENT, **self.headers}
        return self

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "ClientConfig":
        """Build a config from settings loaded by the application."""
        values = {"api_key": settings.api_key, "debug": settings.debug}
        values.update(kwargs)
        return cls(**values)

    def add_header(self, name: str, value: str) -> "ClientConfig":
        """Set a header sent with every request, replacing any of that name."""
        self.headers = {
            key: val
            for key, val in self.headers.items()
            if key.lower() != name.lower()
        }
        self.headers[name] = value
        return self
