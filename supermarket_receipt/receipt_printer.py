"""Receipt formatting utilities."""

from .models import Discount, ProductUnit, Receipt, ReceiptItem

DEFAULT_COLUMNS = 40
TOTAL_LABEL = "Total: "


def format_price(price: float) -> str:
    return f"{price:,.2f}"


def format_quantity(item: ReceiptItem) -> str:
    """Whole units for products sold each, three decimals for weighed ones."""
    if item.product.unit is ProductUnit.EACH:
        return str(int(item.quantity))
    return f"{item.quantity:,.3f}"


class ReceiptPrinter:
    """Renders a receipt as fixed-width text, values right-aligned."""

    def __init__(self, columns: int = DEFAULT_COLUMNS):
        if columns <= 0:
            raise ValueError("columns must be positive")
        self.columns = columns

    def print_receipt(self, receipt: Receipt) -> str:
        lines = []

        for item in receipt.items:
            lines.append(self._print_item(item))

        for discount in receipt.discounts:
            lines.append(self._print_discount(discount))

        lines.append("\n")
        lines.append(self._line(TOTAL_LABEL, format_price(receipt.total_price())))

        return "".join(lines)

    def _print_item(self, item: ReceiptItem) -> str:
        line = self._line(item.product.name, format_price(item.total_price))
        if item.quantity != 1:
            line += f"  {format_price(item.price)} * {format_quantity(item)}\n"
        return line

    def _print_discount(self, discount: Discount) -> str:
        name = f"{discount.description}({discount.product.name})"
        return self._line(name, format_price(discount.discount_amount))

    def _line(self, name: str, value: str) -> str:
        whitespace = max(self.columns - len(name) - len(value), 0)
        return f"{name}{' ' * whitespace}{value}\n"
