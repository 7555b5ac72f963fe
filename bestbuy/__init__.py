"""High-level client for the Best Buy product-catalog APIs."""

__version__ = "1.0.0"

from bestbuy.client import URL_BETA, URL_V1, Client
from bestbuy.config import Settings, load_settings
from bestbuy.errors import (
    AuthorizationError,
    BestBuyError,
    InvalidArgumentError,
    ServiceError,
)
from bestbuy.recommendations import RecommendationKind
from bestbuy.schemas import ClientConfig, ResponseParameters
from bestbuy.selectors import ById, ByIds, ByQuery, as_selector

__all__ = [
    "URL_BETA",
    "URL_V1",
    "AuthorizationError",
    "BestBuyError",
    "ById",
    "ByIds",
    "ByQuery",
    "Client",
    "ClientConfig",
    "InvalidArgumentError",
    "RecommendationKind",
    "ResponseParameters",
    "ServiceError",
    "Settings",
    "as_selector",
    "load_settings",
]
