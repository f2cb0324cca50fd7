from datetime import datetime
from decimal import Decimal

from pydantic import AnyUrl, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Largest amount a Numeric(12, 2) price column holds; finer input is rounded to cents
MAX_PRICE = Decimal("9999999999.99")


class CamelModel(BaseModel):
    """JSON uses camelCase keys; Python code keeps snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductResponseDTO(CamelModel):
    id: str
    name: str
    price: str
    original_price: str | None = None
    image: str
    rating: float
    reviews: int
    category: str
    description: str
    stock: int
    in_stock: bool
    specifications: dict[str, str]
    created_at: datetime


class ProductsSearchQueryDTO(BaseModel):
    """
    Raw query parameters for searching the catalog.

    Numeric parameters stay strings here: malformed values are treated as
    absent by the mapper instead of failing the request.
    """

    category: str | None = None
    search: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    min_rating: str | None = None
    sort_by: str | None = None
    page: str | None = None
    limit: str | None = None


class ProductsSearchResponseDTO(CamelModel):
    products: list[ProductResponseDTO]
    total_products: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class ProductEnvelopeDTO(CamelModel):
    product: ProductResponseDTO


class ProductMutationResponseDTO(CamelModel):
    message: str
    product: ProductResponseDTO


class MessageResponseDTO(BaseModel):
    message: str


class CategoriesResponseDTO(BaseModel):
    categories: list[str]


class CreateProductRequestDTO(CamelModel):
    """Request payload for creating a product (admin only)."""

    name: str = Field(min_length=2, max_length=100, examples=["Wireless Gaming Mouse"])
    price: Decimal = Field(gt=0, le=MAX_PRICE, examples=["59.99"])
    original_price: Decimal | None = Field(
        default=None, gt=0, le=MAX_PRICE, examples=["89.99"]
    )
    image: AnyUrl = Field(examples=["https://images.example.com/mouse.jpeg"])
    category: str = Field(min_length=1, examples=["Electronics"])
    description: str = Field(
        min_length=10,
        max_length=1000,
        examples=["High-precision gaming mouse with RGB lighting."],
    )
    stock: int = Field(ge=0, examples=[60])
    specifications: dict[str, str] | None = Field(default=None, examples=[{"dpi": "16000"}])

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Wireless Gaming Mouse",
                "price": "59.99",
                "originalPrice": "89.99",
                "image": "https://images.example.com/mouse.jpeg",
                "category": "Electronics",
                "description": "High-precision gaming mouse with RGB lighting.",
                "stock": 60,
                "specifications": {"dpi": "16000"},
            }
        },
    )


class UpdateProductRequestDTO(CamelModel):
    """
    Partial update: only the supplied fields are merged into the product.

    Unknown keys are ignored, so a product read from the API (with its id,
    inStock and createdAt) can be edited and sent back as is. The id in the
    path always wins. An explicit null originalPrice removes the discount.
    """

    name: str | None = Field(default=None, min_length=2, max_length=100)
    price: Decimal | None = Field(default=None, gt=0, le=MAX_PRICE)
    original_price: Decimal | None = Field(default=None, gt=0, le=MAX_PRICE)
    image: AnyUrl | None = None
    category: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=10, max_length=1000)
    stock: int | None = Field(default=None, ge=0)
    rating: float | None = Field(default=None, ge=0, le=5)
    reviews: int | None = Field(default=None, ge=0)
    specifications: dict[str, str] | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={"example": {"price": "54.99", "stock": 12}},
    )
