"""End-to-end tests for the click commands against a temporary SQLite file."""

import logging

import jwt
import pytest
from click.testing import CliRunner

from northwind.application.login import signing_key
from northwind.infrastructure.bootstrap import connection_provider
from northwind.infrastructure.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def env(tmp_path):
    return {
        "NORTHWIND_DATABASE_URL": f"sqlite:///{tmp_path / 'cli.db'}",
        "NORTHWIND_AUTH_USERNAME": "admin",
        "NORTHWIND_AUTH_PASSWORD": "s3cret",
        "NORTHWIND_JWT_KEY": "test-signing-key",
        "NORTHWIND_JWT_ISSUER": None,
        "NORTHWIND_JWT_AUDIENCE": None,
    }


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    """Keep each test on its own engine and restore the root logger."""
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    connection_provider.cache_clear()


@pytest.fixture
def invoke(runner, env):
    def _invoke(*args):
        return runner.invoke(cli, list(args), env=env)

    _invoke("db", "init")
    return _invoke


class TestOrderCommands:

    def test_create_show_delete(self, invoke):
        result = invoke(
            "order", "create",
            "--customer", "C1",
            "--employee", "2",
            "--order-date", "2024-01-01",
            "--freight", "5.50",
            "--ship-city", "Berlin",
            "--items", "10:1.50:2,11:4.00:1:0.05",
        )
        assert result.exit_code == 0, result.output
        assert "Order #1 created with 2 line(s)" in result.output

        result = invoke("order", "show", "--id", "1")
        assert result.exit_code == 0, result.output
        assert "Customer:  C1" in result.output
        assert "Freight:   $5.50" in result.output
        assert "Berlin" in result.output

        result = invoke("order", "delete", "--id", "1")
        assert result.exit_code == 0
        assert "Order #1 deleted." in result.output

        result = invoke("order", "show", "--id", "1")
        assert result.exit_code != 0
        assert "Order #1 not found" in result.output

    def test_list(self, invoke):
        assert "No orders found." in invoke("order", "list").output
        invoke("order", "create", "--customer", "C1", "--order-date", "2024-01-01",
               "--ship-country", "Germany")

        result = invoke("order", "list")
        assert "C1" in result.output
        assert "Germany" in result.output

    def test_update(self, invoke):
        invoke("order", "create", "--customer", "C1", "--order-date", "2024-01-01")

        result = invoke("order", "update", "--id", "1", "--customer", "C2",
                        "--order-date", "2024-01-02", "--freight", "3")
        assert result.exit_code == 0, result.output

        shown = invoke("order", "show", "--id", "1").output
        assert "Customer:  C2" in shown
        assert "Ordered:   2024-01-02" in shown

    def test_update_missing(self, invoke):
        result = invoke("order", "update", "--id", "5", "--order-date", "2024-01-01")
        assert result.exit_code != 0
        assert "Order #5 not found" in result.output

    def test_invalid_line_is_reported(self, invoke):
        result = invoke("order", "create", "--order-date", "2024-01-01", "--items", "10:1.50:0")
        assert result.exit_code != 0
        assert "Quantity must be positive" in result.output
        assert "No orders found." in invoke("order", "list").output

    def test_malformed_items(self, invoke):
        result = invoke("order", "create", "--order-date", "2024-01-01", "--items", "10:1.50")
        assert result.exit_code != 0
        assert "Invalid item format" in result.output

    def test_delete_missing(self, invoke):
        result = invoke("order", "delete", "--id", "9")
        assert result.exit_code != 0
        assert "Order #9 not found" in result.output


class TestCatalogCommands:

    def test_category_duplicate_name(self, invoke):
        result = invoke("category", "add", "--name", "Beverages")
        assert result.exit_code == 0, result.output
        assert "Category #1 'Beverages' added." in result.output

        result = invoke("category", "add", "--name", "Beverages")
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_category_update_keeps_own_name(self, invoke):
        invoke("category", "add", "--name", "Beverages")
        result = invoke("category", "update", "--id", "1", "--name", "Beverages",
                        "--description", "Drinks")
        assert result.exit_code == 0, result.output
        assert "Description: Drinks" in invoke("category", "show", "--id", "1").output

    def test_product_and_supplier(self, invoke):
        assert invoke("supplier", "add", "--company", "Exotic Liquids").exit_code == 0
        result = invoke("product", "add", "--name", "Chai", "--price", "18", "--supplier", "1")
        assert result.exit_code == 0, result.output

        listing = invoke("product", "list").output
        assert "Chai" in listing
        assert "$18.00" in listing
        assert "Exotic Liquids" in invoke("supplier", "list").output


class TestAuthCommands:

    def test_login_prints_token(self, invoke):
        result = invoke("auth", "login", "--username", "admin", "--password", "s3cret")
        assert result.exit_code == 0, result.output

        token = result.output.splitlines()[0]
        claims = jwt.decode(token, signing_key("test-signing-key"), algorithms=["HS256"])
        assert claims["name"] == "admin"

    def test_login_rejected(self, invoke):
        result = invoke("auth", "login", "--username", "admin", "--password", "nope")
        assert result.exit_code != 0
        assert "Invalid credentials" in result.output
