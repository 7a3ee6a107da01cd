"""Tests for the bookstore example."""

from routemap import Route, iter_routes


class TestBookstoreRoutes:
    def test_top_level_order(self, example_routes) -> None:
        assert list(example_routes) == ["home", "search", "assets", "books", "brands", "account"]

    def test_books_use_slug(self, example_routes) -> None:
        assert example_routes.books.show == Route("GET", "/books/:slug")
        assert example_routes.books.edit.href({"slug": "dune"}) == "/books/dune/edit"

    def test_brand_products(self, example_routes) -> None:
        products = example_routes.brands.products
        assert list(products)[0] == "list"
        assert products.show.href({"brandId": "acme", "id": 3}) == "/brands/acme/products/3"
        assert example_routes.brands.show == Route("GET", "/brands/:id")

    def test_account_session(self, example_routes) -> None:
        session = example_routes.account.session
        assert dict(session) == {
            "login": Route("GET", "/account/session/new"),
            "create": Route("POST", "/account/session"),
            "destroy": Route("DELETE", "/account/session"),
        }

    def test_assets_wildcard(self, example_routes) -> None:
        assert example_routes.assets.href({"path": "css/app.css"}) == "/assets/css/app.css"
        assert example_routes.assets.method == "ANY"

    def test_search_link(self, example_routes) -> None:
        assert example_routes.search.href(search={"q": "sci fi"}) == "/search?q=sci+fi"

    def test_route_count(self, example_routes) -> None:
        # 2 + 1 + 7 + 2 + 7 + 3 + 3
        assert len(list(iter_routes(example_routes))) == 25
