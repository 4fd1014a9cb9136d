"""Unit tests for the InventoryService domain service."""

import random
from decimal import Decimal

import pytest

from smartinv.application.load_inventory import sample_products
from smartinv.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from smartinv.domain.model.inventory import Inventory
from smartinv.domain.model.product import NonPerishableProduct, PerishableProduct
from smartinv.domain.model.value_objects import Money
from smartinv.domain.service.inventory_service import InventoryService


def _seeded() -> InventoryService:
    svc = InventoryService()
    for record in sample_products():
        svc.add_product(record)
    return svc


def _quantity(svc: InventoryService, product_id: int) -> int:
    return next(r.quantity for r in svc.list_all() if r.id == product_id)


# ── add_product ──────────────────────────────────────────────────────────────


class TestAddProduct:

    def test_appends_in_order(self):
        svc = _seeded()
        svc.add_product(NonPerishableProduct(105, "Rice", Money.of("60"), 40))
        assert [r.id for r in svc.list_all()] == [101, 102, 103, 104, 105]

    def test_duplicate_id_accepted_and_first_match_wins(self):
        svc = _seeded()
        svc.add_product(NonPerishableProduct(101, "Shadow Milk", Money.of("1"), 99))

        assert svc.product_count == 5
        svc.sell_product(101, 1)

        records = list(svc.list_all())
        assert records[0].quantity == 14
        assert records[4].quantity == 99

    def test_foreign_currency_rejected(self):
        svc = _seeded()
        with pytest.raises(ValidationError, match="priced in USD"):
            svc.add_product(NonPerishableProduct(105, "Adapter", Money(Decimal("5"), "USD"), 3))
        assert svc.product_count == 4

    def test_store_keeps_its_own_copy(self):
        svc = InventoryService()
        rec = NonPerishableProduct(1, "Salt", Money.of("10"), 5)
        svc.add_product(rec)
        rec.quantity = 500
        assert _quantity(svc, 1) == 5


# ── sell_product ─────────────────────────────────────────────────────────────


class TestSellProduct:

    def test_sample_sale(self):
        svc = _seeded()
        receipt = svc.sell_product(101, 5)

        assert _quantity(svc, 101) == 10
        assert svc.total_sales == Money.of("225.0")
        assert receipt.amount == Money.of("225")
        assert receipt.remaining == 10
        assert receipt.product_name == "Milk"

    def test_sell_entire_stock(self):
        svc = _seeded()
        svc.sell_product(103, 2)
        assert _quantity(svc, 103) == 0

    def test_oversell_rejected_and_state_unchanged(self):
        svc = _seeded()
        with pytest.raises(InsufficientStockError, match="Insufficient stock") as info:
            svc.sell_product(102, 5)

        assert info.value.available == 4
        assert info.value.requested == 5
        assert _quantity(svc, 102) == 4
        assert svc.total_sales == Money.zero()

    def test_unknown_id_rejected_and_state_unchanged(self):
        svc = _seeded()
        before = [(r.id, r.quantity) for r in svc.list_all()]

        with pytest.raises(ProductNotFoundError, match="not found"):
            svc.sell_product(999, 1)

        assert [(r.id, r.quantity) for r in svc.list_all()] == before
        assert svc.total_sales == Money.zero()

    def test_foreign_currency_record_leaves_stock_and_sales_untouched(self):
        record = NonPerishableProduct(1, "Adapter", Money(Decimal("5"), "USD"), 10)
        svc = InventoryService(inventory=Inventory([record]))

        with pytest.raises(ValidationError, match="Cannot combine"):
            svc.sell_product(1, 3)

        assert _quantity(svc, 1) == 10
        assert svc.total_sales == Money.zero()

    @pytest.mark.parametrize("qty", [0, -3])
    def test_non_positive_quantity_rejected(self, qty):
        svc = _seeded()
        with pytest.raises(ValidationError, match="must be positive"):
            svc.sell_product(101, qty)
        assert _quantity(svc, 101) == 15

    def test_sales_sum_over_random_sequence(self):
        rng = random.Random(7)
        svc = _seeded()
        initial = {r.id: r.quantity for r in svc.list_all()}
        prices = {r.id: r.unit_price for r in svc.list_all()}
        sold = {pid: 0 for pid in initial}
        expected_total = Money.zero()

        for _ in range(200):
            pid = rng.choice(list(initial))
            left = initial[pid] - sold[pid]
            if left == 0:
                continue
            qty = rng.randint(1, left)
            svc.sell_product(pid, qty)
            sold[pid] += qty
            expected_total = expected_total + prices[pid] * qty

        for pid, qty in initial.items():
            assert _quantity(svc, pid) == qty - sold[pid]
        assert svc.total_sales == expected_total


# ── restock_product ──────────────────────────────────────────────────────────


class TestRestockProduct:

    def test_adds_exact_quantity(self):
        svc = _seeded()
        assert svc.restock_product(102, 6) == 10
        assert _quantity(svc, 102) == 10

    def test_unknown_id_is_soft_failure(self):
        svc = _seeded()
        before = [(r.id, r.quantity) for r in svc.list_all()]

        assert svc.restock_product(999, 5) is None
        assert [(r.id, r.quantity) for r in svc.list_all()] == before

    def test_restock_does_not_touch_sales(self):
        svc = _seeded()
        svc.restock_product(101, 5)
        assert svc.total_sales == Money.zero()

    def test_non_positive_quantity_rejected(self):
        svc = _seeded()
        with pytest.raises(ValidationError, match="must be positive"):
            svc.restock_product(101, 0)


# ── Queries ──────────────────────────────────────────────────────────────────


class TestQueries:

    def test_low_stock_scan_on_samples(self):
        svc = _seeded()
        assert [r.name for r in svc.low_stock_scan(10)] == ["Sugar", "Tea Leaves"]

    def test_low_stock_scan_matches_filter_for_random_stores(self):
        rng = random.Random(11)
        for _ in range(20):
            svc = InventoryService()
            for i in range(rng.randint(0, 15)):
                svc.add_product(
                    PerishableProduct(i, f"P{i}", Money.of("1"), rng.randint(0, 20), "01-01-2030")
                )
            expected = [r.id for r in svc.list_all() if r.quantity < 10]
            assert [r.id for r in svc.low_stock_scan()] == expected

    def test_low_stock_threshold_is_strict(self):
        svc = InventoryService()
        svc.add_product(NonPerishableProduct(1, "Exactly", Money.of("1"), 10))
        svc.add_product(NonPerishableProduct(2, "Below", Money.of("1"), 9))
        assert [r.id for r in svc.low_stock_scan(10)] == [2]

    def test_list_all_on_empty_store(self):
        svc = InventoryService()
        assert list(svc.list_all()) == []
        assert len(svc.list_all()) == 0

    def test_list_all_is_restartable_and_live(self):
        svc = _seeded()
        listing = svc.list_all()
        assert len(list(listing)) == 4

        svc.add_product(NonPerishableProduct(105, "Rice", Money.of("60"), 40))
        assert len(list(listing)) == 5

    def test_listed_records_are_copies(self):
        svc = _seeded()
        first = next(iter(svc.list_all()))
        first.quantity = 0
        assert _quantity(svc, 101) == 15

    def test_aggregate_report(self):
        svc = _seeded()
        svc.sell_product(101, 5)
        summary = svc.aggregate_report()

        assert summary.product_count == 4
        assert summary.total_items == 10 + 4 + 2 + 25
        # 45*10 + 55*4 + 120*2 + 35*25
        assert summary.total_stock_value == Money.of("1785")
        assert summary.total_sales == Money.of("225")
        assert [p.name for p in summary.products] == ["Milk", "Sugar", "Tea Leaves", "Yogurt"]

    def test_aggregate_report_on_empty_store(self):
        summary = InventoryService().aggregate_report()
        assert summary.product_count == 0
        assert summary.total_items == 0
        assert summary.total_stock_value == Money.zero()

    def test_load_replaces_content(self):
        svc = _seeded()
        svc.load([NonPerishableProduct(7, "Only", Money.of("1"), 1)])
        assert [r.id for r in svc.list_all()] == [7]

    def test_load_rejects_foreign_currency(self):
        svc = _seeded()
        with pytest.raises(ValidationError, match="priced in USD"):
            svc.load([NonPerishableProduct(7, "Adapter", Money(Decimal("5"), "USD"), 1)])
        assert svc.product_count == 4
