from __future__ import annotations

from storefront_lite.domain.cart import CartItem, CartLedger
from storefront_lite.entrypoints.http.dtos.cart import (
    CartItemResponseDTO,
    CartResponseDTO,
    CartSummaryResponseDTO,
)
from storefront_lite.use_cases.summarize_cart import CartSummary


class CartMapper:
    """Maps a cart ledger (plus its checkout summary) to the REST response."""

    @staticmethod
    def to_item_response(item: CartItem) -> CartItemResponseDTO:
        return CartItemResponseDTO(
            id=item.id,
            name=item.name,
            price=str(item.price),
            image=item.image,
            quantity=item.quantity,
            variant=item.variant,
            line_total=str(item.line_total),
        )

    @staticmethod
    def to_summary_response(summary: CartSummary) -> CartSummaryResponseDTO:
        return CartSummaryResponseDTO(
            subtotal=str(summary.subtotal),
            shipping=str(summary.shipping),
            tax=str(summary.tax),
            total=str(summary.total),
            free_shipping_remaining=str(summary.free_shipping_remaining),
        )

    @staticmethod
    def to_response(cart_id: str, ledger: CartLedger, summary: CartSummary) -> CartResponseDTO:
        return CartResponseDTO(
            cart_id=cart_id,
            items=[CartMapper.to_item_response(item) for item in ledger.items],
            total=str(ledger.total),
            item_count=ledger.get_item_count(),
            summary=CartMapper.to_summary_response(summary),
        )
