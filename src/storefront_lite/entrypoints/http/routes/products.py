from fastapi import APIRouter, Depends, Query, status

from storefront_lite.entrypoints.http.dependencies import (
    get_create_product_use_case,
    get_delete_product_use_case,
    get_get_product_by_id_use_case,
    get_list_categories_use_case,
    get_search_catalog_use_case,
    get_update_product_use_case,
)
from storefront_lite.entrypoints.http.dtos.products import (
    CategoriesResponseDTO,
    CreateProductRequestDTO,
    MessageResponseDTO,
    ProductEnvelopeDTO,
    ProductMutationResponseDTO,
    ProductsSearchQueryDTO,
    ProductsSearchResponseDTO,
    UpdateProductRequestDTO,
)
from storefront_lite.entrypoints.http.error_responses import ErrorResponse
from storefront_lite.entrypoints.http.mappers.product_mapper import ProductMapper
from storefront_lite.entrypoints.http.security import require_admin
from storefront_lite.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from storefront_lite.use_cases.list_product_categories import ListProductCategories
from storefront_lite.use_cases.manage_products import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
    UpdateProductRequest,
)
from storefront_lite.use_cases.search_product_catalog import SearchProductCatalog


router = APIRouter(tags=["Products"])

_NOT_FOUND = {"model": ErrorResponse, "description": "Product not found"}
_VALIDATION = {"model": ErrorResponse, "description": "Validation error"}
_UNAUTHORIZED = {"model": ErrorResponse, "description": "Missing or unknown access token"}
_FORBIDDEN = {"model": ErrorResponse, "description": "Admin role required"}


def products_search_query(
    category: str | None = Query(
        default=None, description="Category contains (case-insensitive)", examples=["electronics"]
    ),
    search: str | None = Query(
        default=None, description="Name or description contains (case-insensitive)"
    ),
    min_price: str | None = Query(default=None, alias="minPrice", examples=["20.00"]),
    max_price: str | None = Query(default=None, alias="maxPrice", examples=["200.00"]),
    min_rating: str | None = Query(default=None, alias="minRating", examples=["4.5"]),
    sort_by: str | None = Query(
        default=None,
        alias="sortBy",
        description="featured | price-asc | price-desc | rating | newest",
    ),
    page: str | None = Query(default=None, description="1-indexed page, default 1"),
    limit: str | None = Query(default=None, description="Page size, default 12"),
) -> ProductsSearchQueryDTO:
    return ProductsSearchQueryDTO(
        category=category,
        search=search,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )


@router.get(
    "/products",
    response_model=ProductsSearchResponseDTO,
    summary="Search product catalog",
    description="""
    Search the catalog with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - category: case-insensitive substring of the category label
    - search: case-insensitive substring of name or description
    - minPrice / maxPrice / minRating: inclusive bounds
    - Malformed numbers are ignored rather than rejected

    ## Sorting
    featured (catalog order), price-asc, price-desc, rating, newest

    ## Pagination
    - page is 1-indexed (default 1)
    - limit defaults to 12

    ## Example
    ```
    GET /v1/products?category=electronics&sortBy=price-asc&page=1&limit=12
    ```
    """,
)
def search_products(
    query: ProductsSearchQueryDTO = Depends(products_search_query),
    use_case: SearchProductCatalog = Depends(get_search_catalog_use_case),
) -> ProductsSearchResponseDTO:
    """Search products endpoint following parse → execute → map → return pattern."""
    request = ProductMapper.to_domain_request(query)

    result = use_case.execute(request)

    return ProductMapper.to_search_response(result.page)


@router.get(
    "/products/categories/list",
    response_model=CategoriesResponseDTO,
    summary="List product categories",
)
def list_categories(
    use_case: ListProductCategories = Depends(get_list_categories_use_case),
) -> CategoriesResponseDTO:
    return CategoriesResponseDTO(categories=use_case.execute().categories)


@router.get(
    "/products/{product_id}",
    response_model=ProductEnvelopeDTO,
    summary="Get a product",
    responses={404: _NOT_FOUND},
)
def get_product(
    product_id: str,
    use_case: GetProductById = Depends(get_get_product_by_id_use_case),
) -> ProductEnvelopeDTO:
    result = use_case.execute(GetProductByIdRequest(product_id=product_id))
    return ProductEnvelopeDTO(product=ProductMapper.to_product_response(result.product))


@router.post(
    "/products",
    response_model=ProductMutationResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product (admin)",
    dependencies=[Depends(require_admin)],
    responses={400: _VALIDATION, 401: _UNAUTHORIZED, 403: _FORBIDDEN},
)
def create_product(
    payload: CreateProductRequestDTO,
    use_case: CreateProduct = Depends(get_create_product_use_case),
) -> ProductMutationResponseDTO:
    product = use_case.execute(ProductMapper.to_domain_draft(payload))
    return ProductMutationResponseDTO(
        message="Product created successfully",
        product=ProductMapper.to_product_response(product),
    )


@router.put(
    "/products/{product_id}",
    response_model=ProductMutationResponseDTO,
    summary="Update a product (admin)",
    dependencies=[Depends(require_admin)],
    responses={400: _VALIDATION, 401: _UNAUTHORIZED, 403: _FORBIDDEN, 404: _NOT_FOUND},
)
def update_product(
    product_id: str,
    payload: UpdateProductRequestDTO,
    use_case: UpdateProduct = Depends(get_update_product_use_case),
) -> ProductMutationResponseDTO:
    product = use_case.execute(
        UpdateProductRequest(
            product_id=product_id,
            changes=ProductMapper.to_domain_changes(payload),
        )
    )
    return ProductMutationResponseDTO(
        message="Product updated successfully",
        product=ProductMapper.to_product_response(product),
    )


@router.delete(
    "/products/{product_id}",
    response_model=MessageResponseDTO,
    summary="Delete a product (admin)",
    dependencies=[Depends(require_admin)],
    responses={401: _UNAUTHORIZED, 403: _FORBIDDEN, 404: _NOT_FOUND},
)
def delete_product(
    product_id: str,
    use_case: DeleteProduct = Depends(get_delete_product_use_case),
) -> MessageResponseDTO:
    use_case.execute(product_id)
    return MessageResponseDTO(message="Product deleted successfully")
