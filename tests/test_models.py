"""Tests for the data models."""

import dataclasses

import pytest

from supermarket_receipt.models import (
    Discount,
    Product,
    ProductUnit,
    Receipt,
    ReceiptItem,
)


class TestProduct:
    def test_equality_by_identity_fields(self) -> None:
        assert Product("rice") == Product("rice", ProductUnit.EACH)
        assert Product("rice") != Product("rice", ProductUnit.KILO)

    def test_hashable_for_grouping(self) -> None:
        assert len({Product("rice"), Product("rice")}) == 1

    def test_immutable(self) -> None:
        product = Product("rice")
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.name = "beans"


class TestReceipt:
    def test_empty_receipt_totals_zero(self) -> None:
        receipt = Receipt()
        assert receipt.items == ()
        assert receipt.discounts == ()
        assert receipt.total_price() == 0.0

    def test_total_adds_discount_amounts(self) -> None:
        rice = Product("rice")
        receipt = Receipt(
            items=(ReceiptItem(rice, 2.0, 2.5, 5.0),),
            discounts=(Discount(rice, "10% off", -0.5),),
        )
        assert receipt.total_price() == pytest.approx(4.5)
