"""Querystring and path-expression helpers."""

from collections.abc import Iterable
from urllib.parse import quote

from bestbuy.schemas import ResponseParameters


def format_query(params: ResponseParameters) -> str:
    """Render response parameters as a querystring.

    The API key always comes first and is written verbatim. Every other
    parameter is appended, percent-encoded, only when it has a value;
    zero page and page size count as unset.
    """
    query = f"apiKey={params.api_key}"

    parameters = [
        ("facets", params.facets),
        ("format", params.format),
        ("page", params.page),
        ("pageSize", params.page_size),
        ("show", params.show),
        ("sort", params.sort),
    ]
    for name, value in parameters:
        if value is None:
            continue
        value = str(value)
        if value and value != "0":
            query += f"&{name}={quote(value, safe='')}"

    return query


def replace_spaces(path: str) -> str:
    """Escape literal spaces in a path; nothing else is touched."""
    return path.replace(" ", "%20")


def render_id_list(field: str, ids: Iterable[int]) -> str:
    """Render ``field in(1, 2, 3)`` filter syntax."""
    return f"{field} in({', '.join(str(i) for i in ids)})"
