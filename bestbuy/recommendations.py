"""Recommendation kinds and the qualifiers each one accepts."""

from enum import Enum

from bestbuy.errors import InvalidArgumentError


class RecommendationKind(str, Enum):
    """Recommendation endpoints offered by the beta API."""

    MOST_VIEWED = "mostViewed"
    TRENDING = "trendingViewed"
    ALSO_VIEWED = "alsoViewed"

    @property
    def needs_sku(self) -> bool:
        return self is RecommendationKind.ALSO_VIEWED

    def validate(self, sku: int | None, category_id: str | None) -> None:
        """Reject qualifier combinations the API does not support."""
        if self.needs_sku:
            if sku is None:
                raise InvalidArgumentError(f"{self.name} requires a product SKU")
            if category_id is not None:
                raise InvalidArgumentError(
                    f"{self.name} does not accept a category id"
                )
            return

        if sku is not None:
            raise InvalidArgumentError(
                f"{self.name} does not accept a SKU; "
                "use a category id or no qualifier"
            )

    def path(self, sku: int | None = None, category_id: str | None = None) -> str:
        """Build the path expression for this kind after validating it."""
        self.validate(sku, category_id)
        if self.needs_sku:
            return f"/products/{sku}/{self.value}"
        if category_id is not None:
            return f"/products/{self.value}(categoryId={category_id})"
        return f"/products/{self.value}"
