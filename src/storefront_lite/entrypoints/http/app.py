from __future__ import annotations

import logging

from fastapi import FastAPI

from storefront_lite.adapters.in_memory_cart_storage import InMemoryCartStorage
from storefront_lite.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from storefront_lite.entrypoints.http.exception_handlers import register_exception_handlers
from storefront_lite.entrypoints.http.routes.accounts import router as accounts_router
from storefront_lite.entrypoints.http.routes.cart import router as cart_router
from storefront_lite.entrypoints.http.routes.health import router as health_router
from storefront_lite.entrypoints.http.routes.products import router as products_router
from storefront_lite.infra import config
from storefront_lite.infra.logging_config import configure_logging
from storefront_lite.infra.seed_catalog import default_catalog
from storefront_lite.ports.cart_storage import CartStorage
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository

logger = logging.getLogger(__name__)


def build_app(
    product_repository: ProductCatalogRepository | None = None,
    cart_storage: CartStorage | None = None,
    api_tokens: dict[str, str] | None = None,
    use_database: bool | None = None,
) -> FastAPI:
    """
    Build the application with its own stores.

    Arguments left as None are taken from the environment: the database is
    used when DATABASE_URL is set, otherwise in-memory stores are created
    (seeded with the demo catalog unless SEED_CATALOG is off).
    """
    configure_logging(config.log_level())

    if use_database is None:
        use_database = config.database_url() is not None and product_repository is None

    if product_repository is None:
        seed = default_catalog() if config.seed_catalog() else []
        product_repository = InMemoryProductCatalogRepository(seed)

    app = FastAPI(
        title="Storefront Lite API",
        description="""
        Storefront API for browsing the product catalog and keeping a shopping cart.

        ## Features
        - Search the catalog with filters, sorting and pagination
        - Get product details and the list of categories
        - Server-side carts with checkout totals
        - Admin product management
        - Registration and login form checks

        ## Authentication
        Write operations on products need a bearer token with the admin role.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    app.state.product_repository = product_repository
    app.state.cart_storage = cart_storage if cart_storage is not None else InMemoryCartStorage()
    app.state.api_tokens = dict(api_tokens) if api_tokens is not None else config.api_tokens()
    app.state.use_database = use_database

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router, prefix="/v1")
    app.include_router(cart_router, prefix="/v1")
    app.include_router(accounts_router, prefix="/v1")

    logger.info(
        "Application built",
        extra={"use_database": use_database, "token_count": len(app.state.api_tokens)},
    )
    return app


app = build_app()
