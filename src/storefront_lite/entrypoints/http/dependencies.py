"""
Dependency injection for FastAPI routes.

Key principle: stores are owned by the app instance, database sessions are
per-request. With a database configured, each request gets one session
shared by every repository it touches; otherwise the in-memory stores
created by build_app() are handed out.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from storefront_lite.adapters.sqlalchemy_cart_storage import SqlAlchemyCartStorage
from storefront_lite.adapters.sqlalchemy_product_catalog_repository import (
    SqlAlchemyProductCatalogRepository,
)
from storefront_lite.infra.db.session import get_session
from storefront_lite.ports.cart_storage import CartStorage
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository
from storefront_lite.use_cases.get_product_by_id import GetProductById
from storefront_lite.use_cases.list_product_categories import ListProductCategories
from storefront_lite.use_cases.manage_cart import ManageCart
from storefront_lite.use_cases.manage_products import CreateProduct, DeleteProduct, UpdateProduct
from storefront_lite.use_cases.search_product_catalog import SearchProductCatalog
from storefront_lite.use_cases.summarize_cart import SummarizeCart


def get_db(request: Request) -> Generator[Session | None, None, None]:
    """
    Provides a database session for a single request, or None without a database.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session | None: SQLAlchemy database session (per-request)
    """
    if not request.app.state.use_database:
        yield None
        return

    with get_session() as session:
        yield session


def get_product_repository(
    request: Request, db: Session | None = Depends(get_db)
) -> ProductCatalogRepository:
    if db is None:
        return request.app.state.product_repository
    return SqlAlchemyProductCatalogRepository(session=db)


def get_cart_storage(request: Request, db: Session | None = Depends(get_db)) -> CartStorage:
    if db is None:
        return request.app.state.cart_storage
    return SqlAlchemyCartStorage(session=db)


def get_search_catalog_use_case(
    repository: ProductCatalogRepository = Depends(get_product_repository),
) -> SearchProductCatalog:
    return SearchProductCatalog(product_catalog_repository=repository)


def get_get_product_by_id_use_case(
    repository: ProductCatalogRepository = Depends(get_product_repository),
) -> GetProductById:
    return GetProductById(product_catalog_repository=repository)


def get_list_categories_use_case(
    repository: ProductCatalogRepository = Depends(get_product_repository),
) -> ListProductCategories:
    return ListProductCategories(product_catalog_repository=repository)


def get_create_product_use_case(
    repository: ProductCatalogRepository = Depends(get_product_repository),
) -> CreateProduct:
    return CreateProduct(product_catalog_repository=repository)


def get_update_product_use_case(
    repository: ProductCatalogRepository = Depends(get_product_repository),
) -> UpdateProduct:
    return UpdateProduct(product_catalog_repository=repository)


def get_delete_product_use_case(
    repository: ProductCatalogRepository = Depends(get_product_repository),
) -> DeleteProduct:
    return DeleteProduct(product_catalog_repository=repository)


def get_manage_cart_use_case(
    storage: CartStorage = Depends(get_cart_storage),
    repository: ProductCatalogRepository = Depends(get_product_repository),
) -> ManageCart:
    return ManageCart(cart_storage=storage, product_catalog_repository=repository)


def get_summarize_cart_use_case() -> SummarizeCart:
    return SummarizeCart()
