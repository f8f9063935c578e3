"""Tests for receipt formatting."""

import pytest

from supermarket_receipt.models import Discount, Product, ProductUnit, Receipt, ReceiptItem
from supermarket_receipt.offers import SpecialOfferType
from supermarket_receipt.pricing import check_out
from supermarket_receipt.receipt_printer import (
    ReceiptPrinter,
    format_price,
    format_quantity,
)


class TestFormatting:
    @pytest.mark.parametrize(
        "price, expected",
        [(0.0, "0.00"), (0.99, "0.99"), (-0.299, "-0.30"), (1234.5, "1,234.50")],
    )
    def test_format_price(self, price, expected) -> None:
        assert format_price(price) == expected

    def test_each_quantity_is_whole(self) -> None:
        item = ReceiptItem(Product("toothbrush"), 3.0, 0.99, 2.97)
        assert format_quantity(item) == "3"

    def test_kilo_quantity_three_decimals(self) -> None:
        item = ReceiptItem(Product("apples", ProductUnit.KILO), 0.5, 1.99, 0.995)
        assert format_quantity(item) == "0.500"


class TestReceiptPrinter:
    def test_empty_receipt(self, printer) -> None:
        assert printer.print_receipt(Receipt()) == (
            "\n"
            "Total:                              0.00\n"
        )

    def test_single_item_has_no_quantity_line(self, printer, cart, catalog, offers, toothbrush) -> None:
        cart.add_item(toothbrush)
        assert printer.print_receipt(check_out(cart, catalog, offers)) == (
            "toothbrush                          0.99\n"
            "\n"
            "Total:                              0.99\n"
        )

    def test_quantity_and_discount_lines(self, printer, cart, catalog, offers, toothbrush) -> None:
        for _ in range(3):
            cart.add_item(toothbrush)
        offers.add_special_offer(SpecialOfferType.THREE_FOR_TWO, toothbrush)

        assert printer.print_receipt(check_out(cart, catalog, offers)) == (
            "toothbrush                          2.97\n"
            "  0.99 * 3\n"
            "3 for 2(toothbrush)                -0.99\n"
            "\n"
            "Total:                              1.98\n"
        )

    def test_weighed_item(self, printer, cart, catalog, offers, apples) -> None:
        cart.add_item_quantity(apples, 4)
        assert printer.print_receipt(check_out(cart, catalog, offers)) == (
            "apples                              7.96\n"
            "  1.99 * 4.000\n"
            "\n"
            "Total:                              7.96\n"
        )

    def test_narrow_columns_overflow_without_padding(self, cart, catalog, offers, cherry_tomatoes) -> None:
        cart.add_item_quantity(cherry_tomatoes, 2)
        offers.add_special_offer(SpecialOfferType.TWO_FOR_AMOUNT, cherry_tomatoes, 0.99)
        printed = ReceiptPrinter(32).print_receipt(check_out(cart, catalog, offers))

        lines = printed.split("\n")
        assert lines[0] == "cherry tomato box           1.38"
        assert lines[2] == "2 for 0.99(cherry tomato box)-0.39"
        assert lines[-2] == "Total:                      0.99"

    def test_discounts_follow_items(self, printer) -> None:
        rice = Product("rice")
        beans = Product("beans")
        receipt = Receipt(
            items=(ReceiptItem(rice, 1.0, 2.0, 2.0), ReceiptItem(beans, 1.0, 1.0, 1.0)),
            discounts=(Discount(rice, "50% off", -1.0),),
        )
        lines = printer.print_receipt(receipt).split("\n")
        assert lines[0].startswith("rice")
        assert lines[1].startswith("beans")
        assert lines[2].startswith("50% off(rice)")

    @pytest.mark.parametrize("columns", [0, -10])
    def test_columns_must_be_positive(self, columns) -> None:
        with pytest.raises(ValueError):
            ReceiptPrinter(columns)
