"""HTTP client for the Best Buy product-catalog APIs."""

import logging
import re
from typing import Any

import httpx

from bestbuy.errors import AuthorizationError, InvalidArgumentError, ServiceError
from bestbuy.query import format_query, render_id_list, replace_spaces
from bestbuy.recommendations import RecommendationKind
from bestbuy.schemas import ClientConfig, ResponseParameters
from bestbuy.selectors import (
    ById,
    ByIds,
    ByQuery,
    Selector,
    SelectorLike,
    as_selector,
)

logger = logging.getLogger(__name__)

URL_V1 = "https://api.bestbuy.com/v1"
URL_BETA = "https://api.bestbuy.com/beta"

# Category ids such as cat00000, abcat0400000 or pcmcat209400050001
CATEGORY_ID_PATTERN = re.compile(r"(ab|pcm)?cat[0-9]+")


def _filter_expression(selector: Selector, field: str) -> str:
    """Render a selector as the filter inside ``resource(...)``."""
    if isinstance(selector, ById):
        return render_id_list(field, [selector.id])
    if isinstance(selector, ByIds):
        return render_id_list(field, selector.ids)
    return selector.query


class Client:
    """Synchronous client for the Best Buy APIs.

    Every endpoint method accepts a selector (an id, a list of ids, a filter
    query or a :mod:`bestbuy.selectors` instance) and optional
    :class:`ResponseParameters`, and returns the decoded JSON object.
    """

    def __init__(
        self,
        config: ClientConfig | str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            config: Full client configuration, or just an API key
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
        """
        if config is None or isinstance(config, str):
            config = ClientConfig(api_key=config)
        self.config = config
        self.transport = transport

    def build_url(
        self, root: str, path: str, params: ResponseParameters
    ) -> str:
        """Build the absolute URL for a request.

        The URL is returned as assembled; httpx encodes it when sending.
        Writes the configured API key into ``params`` and clears ``format``
        for single-resource lookups (paths ending in ``.json``), which the
        API rejects with a 400 when ``format`` is present.

        Raises:
            AuthorizationError: If no API key is configured.
        """
        if not self.config.api_key:
            raise AuthorizationError(
                "A Best Buy developer API key is required. Register for one at "
                "developer.bestbuy.com and pass it as `Client(YOUR_API_KEY)`, "
                "or set BBY_API_KEY and load it with `load_settings()`."
            )

        params.api_key = self.config.api_key
        params.format = "" if path.endswith(".json") else "json"

        return f"{root}{replace_spaces(path)}?{format_query(params)}"

    def request(
        self, root: str, path: str, params: ResponseParameters | None = None
    ) -> dict[str, Any]:
        """Make a GET request to the API and decode the JSON body.

        Raises:
            AuthorizationError: If no API key is configured.
            ServiceError: If the request fails or the body is not a JSON object.
        """
        if params is None:
            params = ResponseParameters()
        url = self.build_url(root, path, params)

        level = logging.INFO if self.config.debug else logging.DEBUG
        logger.log(level, "Requesting", extra={"root": root, "path": path})

        try:
            with httpx.Client(
                headers=self.config.headers, transport=self.transport
            ) as http:
                response = http.get(url)
                logger.log(
                    level,
                    "Received response",
                    extra={"path": path, "status": response.status_code},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Service returned an error status",
                extra={"path": path, "status": exc.response.status_code},
            )
            raise ServiceError(
                "An error occurred when communicating with the service",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                "Request failed", extra={"path": path, "error": str(exc)}
            )
            raise ServiceError(
                "An error occurred when communicating with the service"
            ) from exc

        if not isinstance(data, dict):
            logger.warning(
                "Unexpected response body",
                extra={"path": path, "error": f"got {type(data).__name__}"},
            )
            raise ServiceError(
                "Unexpected response body; expected a JSON object",
                status_code=response.status_code,
            )
        return data

    def availability(
        self,
        products: SelectorLike,
        stores: SelectorLike,
        params: ResponseParameters | None = None,
    ) -> dict[str, Any]:
        """Get availability of products in stores.

        Args:
            products: SKU, list of SKUs or product filter query
            stores: Store id, list of store ids or store filter query
            params: Response parameters

        Returns:
            Availability response from the API
        """
        products = as_selector(products)
        stores = as_selector(stores)
        if products is None or stores is None:
            raise InvalidArgumentError(
                "Availability needs both a product and a store selector"
            )

        path = (
            f"/products({_filter_expression(products, 'sku')})"
            f"+stores({_filter_expression(stores, 'storeId')})"
        )
        return self.request(URL_V1, path, params)

    def categories(
        self,
        search: str | ByQuery | None = None,
        params: ResponseParameters | None = None,
    ) -> dict[str, Any]:
        """Get categories, either one by id or those matching a query.

        Args:
            search: Category id (e.g. ``abcat0400000``) or filter query
            params: Response parameters
        """
        if isinstance(search, ByQuery):
            search = search.query
        if search is not None and not isinstance(search, str):
            raise InvalidArgumentError(
                f"Categories are selected by id or query text, not {search!r}"
            )
        if not search:
            return self.request(URL_V1, "/categories", params)
        if CATEGORY_ID_PATTERN.fullmatch(search):
            return self.request(URL_V1, f"/categories/{search}.json", params)
        return self.request(URL_V1, f"/categories({search})", params)

    def open_box(
        self,
        selector: SelectorLike = None,
        params: ResponseParameters | None = None,
    ) -> dict[str, Any]:
        """Get open-box offers for a SKU, a list of SKUs, a query or all."""
        selector = as_selector(selector)
        if selector is None:
            path = "/products/openBox"
        elif isinstance(selector, ById):
            path = f"/products/{selector.id}/openBox"
        else:
            path = f"/products/openBox({_filter_expression(selector, 'sku')})"
        return self.request(URL_BETA, path, params)

    def products(
        self,
        selector: SelectorLike = None,
        params: ResponseParameters | None = None,
    ) -> dict[str, Any]:
        """Get a product by SKU, several products, or products matching a query."""
        return self._collection(URL_V1, "products", "sku", selector, params)

    def recommendations(
        self,
        kind: RecommendationKind | str,
        sku: int | None = None,
        category_id: str | None = None,
        params: ResponseParameters | None = None,
    ) -> dict[str, Any]:
        """Get product recommendations.

        ``ALSO_VIEWED`` needs a SKU. ``MOST_VIEWED`` and ``TRENDING`` work
        globally or for a single category.

        Raises:
            InvalidArgumentError: If the kind and qualifiers do not combine.
        """
        try:
            kind = RecommendationKind(kind)
        except ValueError:
            try:
                kind = RecommendationKind[str(kind).upper()]
            except KeyError:
                raise InvalidArgumentError(
                    f"Unknown recommendation kind {kind!r}"
                ) from None
        return self.request(URL_BETA, kind.path(sku, category_id), params)

    def reviews(
        self,
        selector: SelectorLike = None,
        params: ResponseParameters | None = None,
    ) -> dict[str, Any]:
        """Get a review by id, several reviews, or reviews matching a query."""
        return self._collection(URL_V1, "reviews", "id", selector, params)

    def stores(
        self,
        selector: SelectorLike = None,
        params: ResponseParameters | None = None,
    ) -> dict[str, Any]:
        """Get a store by id, several stores, or stores matching a query."""
        return self._collection(URL_V1, "stores", "storeId", selector, params)

    def warranties(
        self, sku: SelectorLike, params: ResponseParameters | None = None
    ) -> dict[str, Any]:
        """Get the warranties available for a single product."""
        selector = as_selector(sku)
        if not isinstance(selector, ById):
            raise InvalidArgumentError("Warranties can only be listed for one SKU")
        return self.request(
            URL_V1, f"/products/{selector.id}/warranties.json", params
        )

    def _collection(
        self,
        root: str,
        resource: str,
        id_field: str,
        selector: SelectorLike,
        params: ResponseParameters | None,
    ) -> dict[str, Any]:
        selector = as_selector(selector)
        if selector is None:
            path = f"/{resource}"
        elif isinstance(selector, ById):
            path = f"/{resource}/{selector.id}.json"
        else:
            path = f"/{resource}({_filter_expression(selector, id_field)})"
        return self.request(root, path, params)
