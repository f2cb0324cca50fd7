from typing import Annotated

from fastapi import APIRouter, Depends, Path

from storefront_lite.domain.cart import CartLedger
from storefront_lite.entrypoints.http.dependencies import (
    get_manage_cart_use_case,
    get_summarize_cart_use_case,
)
from storefront_lite.entrypoints.http.dtos.cart import (
    AddCartItemRequestDTO,
    CartResponseDTO,
    UpdateCartItemRequestDTO,
)
from storefront_lite.entrypoints.http.error_responses import ErrorResponse
from storefront_lite.entrypoints.http.mappers.cart_mapper import CartMapper
from storefront_lite.use_cases.manage_cart import ManageCart
from storefront_lite.use_cases.summarize_cart import SummarizeCart


router = APIRouter(prefix="/carts/{cart_id}", tags=["Cart"])

CartId = Annotated[
    str,
    Path(
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Client-chosen cart identifier",
    ),
]


def _render(cart_id: str, ledger: CartLedger, summarize: SummarizeCart) -> CartResponseDTO:
    return CartMapper.to_response(cart_id, ledger, summarize.execute(ledger))


@router.get("", response_model=CartResponseDTO, summary="Get a cart")
def get_cart(
    cart_id: CartId,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
    summarize: SummarizeCart = Depends(get_summarize_cart_use_case),
) -> CartResponseDTO:
    return _render(cart_id, use_case.open(cart_id), summarize)


@router.post(
    "/items",
    response_model=CartResponseDTO,
    summary="Add one unit of a product",
    description="Adding a product already in the cart increments its quantity.",
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
)
def add_cart_item(
    payload: AddCartItemRequestDTO,
    cart_id: CartId,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
    summarize: SummarizeCart = Depends(get_summarize_cart_use_case),
) -> CartResponseDTO:
    ledger = use_case.add_product(cart_id, payload.product_id, variant=payload.variant)
    return _render(cart_id, ledger, summarize)


@router.put(
    "/items/{item_id}",
    response_model=CartResponseDTO,
    summary="Set an item's quantity",
    description="A quantity of zero or less removes the item. Unknown items are ignored.",
)
def update_cart_item(
    item_id: str,
    payload: UpdateCartItemRequestDTO,
    cart_id: CartId,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
    summarize: SummarizeCart = Depends(get_summarize_cart_use_case),
) -> CartResponseDTO:
    ledger = use_case.update_quantity(cart_id, item_id, payload.quantity)
    return _render(cart_id, ledger, summarize)


@router.delete("/items/{item_id}", response_model=CartResponseDTO, summary="Remove an item")
def remove_cart_item(
    item_id: str,
    cart_id: CartId,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
    summarize: SummarizeCart = Depends(get_summarize_cart_use_case),
) -> CartResponseDTO:
    return _render(cart_id, use_case.remove_item(cart_id, item_id), summarize)


@router.delete("", response_model=CartResponseDTO, summary="Empty a cart")
def clear_cart(
    cart_id: CartId,
    use_case: ManageCart = Depends(get_manage_cart_use_case),
    summarize: SummarizeCart = Depends(get_summarize_cart_use_case),
) -> CartResponseDTO:
    return _render(cart_id, use_case.clear(cart_id), summarize)
