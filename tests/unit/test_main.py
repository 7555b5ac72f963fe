"""Unit tests for the command-line front end."""

import pytest

from main import build_parser, parse_selector, run


@pytest.mark.unit
class TestParseSelector:
    """Tests for parse_selector function."""

    def test_missing(self):
        """Test no selector text means no selector."""
        assert parse_selector(None) is None

    def test_single_id(self):
        """Test digits become a single id."""
        assert parse_selector("4312001") == 4312001

    def test_id_list(self):
        """Test comma-separated digits become an id list."""
        assert parse_selector("611, 482") == [611, 482]

    def test_query(self):
        """Test other text is kept as a filter query."""
        assert parse_selector("name=Star*") == "name=Star*"

    def test_query_with_commas(self):
        """Test comma-separated text that is not all digits stays a query."""
        assert parse_selector("area(55347,25)") == "area(55347,25)"


@pytest.mark.unit
class TestRun:
    """Tests for dispatching parsed arguments to the client."""

    def test_products_with_params(self, client, api_key, last_url):
        """Test response options reach the products request."""
        args = build_parser().parse_args(
            ["products", "name=Star*", "--show", "sku,name", "--page-size", "5"]
        )
        run(args, client)
        assert last_url() == (
            f"https://api.bestbuy.com/v1/products(name=Star*)?apiKey={api_key}"
            "&format=json&pageSize=5&show=sku%2Cname"
        )

    def test_availability(self, client, last_url):
        """Test the store option becomes the store selector."""
        args = build_parser().parse_args(
            ["availability", "4312001", "--store", "611,482"]
        )
        run(args, client)
        assert "/v1/products(sku%20in(4312001))+stores(storeId%20in(611,%20482))" in (
            last_url()
        )

    def test_recommendations(self, client, last_url):
        """Test kind and category options select the recommendation path."""
        args = build_parser().parse_args(
            ["recommendations", "--kind", "TRENDING", "--category", "abcat0400000"]
        )
        run(args, client)
        assert "/beta/products/trendingViewed(categoryId=abcat0400000)?" in (
            last_url()
        )

    def test_open_box(self, client, last_url):
        """Test a single SKU selects one open-box listing."""
        args = build_parser().parse_args(["open_box", "2206525"])
        run(args, client)
        assert "/beta/products/2206525/openBox?" in last_url()

    def test_categories_keeps_text(self, client, last_url):
        """Test category ids are never parsed as numbers."""
        args = build_parser().parse_args(["categories", "cat00000"])
        run(args, client)
        assert "/v1/categories/cat00000.json?" in last_url()
