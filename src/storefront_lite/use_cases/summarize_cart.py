from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from storefront_lite.domain.cart import CartLedger


FREE_SHIPPING_THRESHOLD = Decimal("50.00")
FLAT_SHIPPING_FEE = Decimal("5.99")
SALES_TAX_RATE = Decimal("0.08")

_CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class CartSummary:
    item_count: int
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal
    free_shipping_remaining: Decimal


@dataclass(frozen=True, slots=True)
class SummarizeCart:
    """
    Order totals shown at checkout, derived from a ledger.

    Rules:
    - Shipping is free when the subtotal is strictly above the threshold,
      a flat fee otherwise, and nothing for an empty cart
    - Tax is a flat rate on the subtotal (shipping is not taxed)
    - Every amount is rounded to cents with ROUND_HALF_UP, and the total is
      the sum of the rounded parts
    """

    free_shipping_threshold: Decimal = FREE_SHIPPING_THRESHOLD
    flat_shipping_fee: Decimal = FLAT_SHIPPING_FEE
    tax_rate: Decimal = SALES_TAX_RATE

    def execute(self, ledger: CartLedger) -> CartSummary:
        subtotal = _to_cents(ledger.total)
        item_count = ledger.get_item_count()

        if item_count == 0 or subtotal > self.free_shipping_threshold:
            shipping = Decimal("0.00")
        else:
            shipping = _to_cents(self.flat_shipping_fee)

        tax = _to_cents(subtotal * self.tax_rate)
        remaining = max(Decimal("0.00"), _to_cents(self.free_shipping_threshold - subtotal))

        return CartSummary(
            item_count=item_count,
            subtotal=subtotal,
            shipping=shipping,
            tax=tax,
            total=subtotal + shipping + tax,
            free_shipping_remaining=remaining,
        )


def _to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
