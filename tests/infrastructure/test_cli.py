"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from agrimarket.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {"AGRIMARKET_DATA_DIR": str(tmp_path), "AGRIMARKET_LOG_LEVEL": "WARNING"}

    def _run(*args: str):
        return runner.invoke(cli, list(args), env=env)

    return _run


@pytest.fixture
def market(run):
    """Two sellers (ids 1, 2), one buyer (id 3), one product each, a filled cart."""
    run("user", "register", "--name", "Ama", "--email", "ama@example.com", "--role", "community")
    run("user", "register", "--name", "Kofi", "--email", "kofi@example.com", "--role", "community")
    run("user", "register", "--name", "Bea", "--email", "bea@example.com", "--address", "4 Orchard Rd")
    run("product", "add", "--user", "1", "--name", "Apples", "--price", "10", "--quantity", "5")
    run("product", "add", "--user", "2", "--name", "Beans", "--price", "5", "--quantity", "3")
    run("cart", "add", "--user", "3", "--product", "1", "--quantity", "2")
    run("cart", "add", "--user", "3", "--product", "2", "--quantity", "3")
    return run


class TestCli:

    def test_register(self, run):
        result = run("user", "register", "--name", "Ama", "--email", "ama@example.com")
        assert result.exit_code == 0, result.output
        assert "User #1 'Ama' registered as buyer" in result.output

    def test_checkout_splits_by_seller(self, market, tmp_path):
        result = market("order", "checkout", "--user", "3", "--payment", "cash")
        assert result.exit_code == 0, result.output
        assert "Order #1" in result.output
        assert "Order #2" in result.output
        assert "$35.00" in result.output

        products = json.loads((tmp_path / "products.json").read_text(encoding="utf-8"))
        assert {p["id"]: p["quantity"] for p in products} == {"1": 3, "2": 0}

        cart = market("cart", "show", "--user", "3")
        assert "Your cart is empty." in cart.output

    def test_checkout_with_short_stock(self, market):
        market("product", "update", "--user", "2", "--id", "2", "--quantity", "2")
        result = market("order", "checkout", "--user", "3", "--payment", "cash")
        assert result.exit_code == 1
        assert "Insufficient stock for Beans. Available: 2 kg" in result.output
        assert "No orders found." in market("order", "mine", "--user", "3").output

    def test_mark_done_once(self, market):
        market("order", "checkout", "--user", "3", "--payment", "cash")

        assert "Not authorized" in market("order", "done", "--user", "2", "--id", "1").output

        first = market("order", "done", "--user", "1", "--id", "1")
        assert first.exit_code == 0, first.output

        second = market("order", "done", "--user", "1", "--id", "1")
        assert second.exit_code == 1
        assert "already marked as done" in second.output

        incoming = market("order", "incoming", "--user", "1")
        assert "status=completed" in incoming.output

    def test_unknown_user_refused(self, run):
        result = run("cart", "show", "--user", "404")
        assert result.exit_code == 1
        assert "Unknown user" in result.output

    def test_corrupt_store_reports_generic_error(self, run, tmp_path):
        (tmp_path / "products.json").write_text("oops", encoding="utf-8")
        result = run("product", "list")
        assert result.exit_code == 1
        assert "Server error" in result.output
        assert "oops" not in result.output

    def test_record_missing_field_reports_generic_error(self, run, tmp_path):
        (tmp_path / "products.json").write_text('[{"id": "1", "name": "x"}]', encoding="utf-8")
        result = run("product", "list")
        assert result.exit_code == 1
        assert "Server error" in result.output
        assert "KeyError" not in result.output

    def test_record_with_invalid_value_reports_generic_error(self, market, tmp_path):
        path = tmp_path / "products.json"
        products = json.loads(path.read_text(encoding="utf-8"))
        products[0]["quantity"] = -4
        path.write_text(json.dumps(products), encoding="utf-8")

        result = market("order", "checkout", "--user", "3", "--payment", "cash")
        assert result.exit_code == 1
        assert "Server error" in result.output

    def test_address_change_keeps_placed_orders(self, market):
        market("order", "checkout", "--user", "3", "--payment", "cash")

        changed = market("user", "address", "--user", "3", "--address", "9 New St")
        assert changed.exit_code == 0, changed.output
        assert "Address updated to: 9 New St" in changed.output

        assert "Address:  9 New St" in market("user", "me", "--user", "3").output
        orders = market("order", "mine", "--user", "3").output
        assert "Ship to:  4 Orchard Rd" in orders
        assert "9 New St" not in orders

    def test_blank_address_rejected(self, market):
        result = market("user", "address", "--user", "3", "--address", "  ")
        assert result.exit_code == 1
        assert "Address is required" in result.output

    def test_rolled_back_order_ids_not_reused(self, market):
        market("product", "update", "--user", "2", "--id", "2", "--quantity", "2")
        failed = market("order", "checkout", "--user", "3", "--payment", "cash")
        assert failed.exit_code == 1

        market("product", "update", "--user", "2", "--id", "2", "--quantity", "3")
        result = market("order", "checkout", "--user", "3", "--payment", "cash")
        assert result.exit_code == 0, result.output
        assert "Order #3" in result.output
        assert "Order #1" not in result.output
