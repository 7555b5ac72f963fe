"""Tagged selectors naming which resources an endpoint call targets."""

from collections.abc import Iterable
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from bestbuy.errors import InvalidArgumentError


class ById(BaseModel):
    """A single resource identified by its numeric id."""

    model_config = ConfigDict(frozen=True)

    id: int


class ByIds(BaseModel):
    """Several resources identified by numeric ids."""

    model_config = ConfigDict(frozen=True)

    ids: tuple[int, ...] = Field(..., min_length=1)


class ByQuery(BaseModel):
    """Resources matching an upstream filter expression, passed verbatim."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1)


Selector = ById | ByIds | ByQuery

# Plain values accepted wherever a selector is expected
SelectorLike: TypeAlias = int | Iterable[int] | str | Selector | None


def as_selector(value: SelectorLike) -> Selector | None:
    """Coerce a plain value into a selector.

    ``int`` becomes :class:`ById`, ``str`` becomes :class:`ByQuery` and any
    other iterable of ints becomes :class:`ByIds`. ``None`` and existing
    selectors pass through unchanged.
    """
    if value is None or isinstance(value, (ById, ByIds, ByQuery)):
        return value
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Cannot select resources by {value!r}")
    if isinstance(value, int):
        return ById(id=value)
    if isinstance(value, str):
        if not value:
            raise InvalidArgumentError("A search query cannot be empty")
        return ByQuery(query=value)
    if isinstance(value, Iterable):
        ids = tuple(value)
        if not ids:
            raise InvalidArgumentError("At least one id is required")
        if not all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
            raise InvalidArgumentError(f"Ids must be integers, got {ids!r}")
        return ByIds(ids=ids)
    raise InvalidArgumentError(f"Cannot select resources by {value!r}")
