from pydantic import Field

from storefront_lite.entrypoints.http.dtos.products import CamelModel


class AddCartItemRequestDTO(CamelModel):
    product_id: str = Field(min_length=1, examples=["1"])
    variant: str | None = Field(default=None, max_length=100, examples=["Black"])


class UpdateCartItemRequestDTO(CamelModel):
    quantity: int = Field(
        description="New quantity; zero or less removes the item",
        examples=[3],
    )


class CartItemResponseDTO(CamelModel):
    id: str
    name: str
    price: str
    image: str
    quantity: int
    variant: str | None = None
    line_total: str


class CartSummaryResponseDTO(CamelModel):
    subtotal: str
    shipping: str
    tax: str
    total: str
    free_shipping_remaining: str


class CartResponseDTO(CamelModel):
    cart_id: str
    items: list[CartItemResponseDTO]
    total: str
    item_count: int
    summary: CartSummaryResponseDTO
