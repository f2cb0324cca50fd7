"""SQLAlchemy implementation of ProductCatalogRepository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront_lite.domain.product import Product
from storefront_lite.infra.db.models.product import ProductRow
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository


class SqlAlchemyProductCatalogRepository(ProductCatalogRepository):
    """
    Relational implementation of ProductCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Catalog order is the surrogate row_id (insertion order)
    - Converts ProductRow (infrastructure) to Product (domain)
    - Never commits; the per-request session owns the transaction
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def list_all(self) -> list[Product]:
        query = select(ProductRow).order_by(ProductRow.row_id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, product_id: str) -> Product | None:
        row = self._get_row(product_id)
        return self._to_domain(row) if row else None

    def add(self, product: Product) -> None:
        self._session.add(self._to_row(product))
        self._session.flush()

    def update(self, product: Product) -> bool:
        row = self._get_row(product.id)
        if row is None:
            return False

        row.name = product.name
        row.price = product.price
        row.original_price = product.original_price
        row.image = product.image
        row.rating = product.rating
        row.reviews = product.reviews
        row.category = product.category
        row.description = product.description
        row.stock = product.stock
        row.specifications = dict(product.specifications)
        self._session.flush()
        return True

    def delete(self, product_id: str) -> bool:
        row = self._get_row(product_id)
        if row is None:
            return False

        self._session.delete(row)
        self._session.flush()
        return True

    def list_categories(self) -> list[str]:
        # DISTINCT would lose first-seen order, so dedupe here
        query = select(ProductRow.category).order_by(ProductRow.row_id)
        categories = self._session.execute(query).scalars().all()
        return list(dict.fromkeys(categories))

    def _get_row(self, product_id: str) -> ProductRow | None:
        query = select(ProductRow).where(ProductRow.id == product_id)
        return self._session.execute(query).scalar_one_or_none()

    def _to_row(self, product: Product) -> ProductRow:
        return ProductRow(
            id=product.id,
            name=product.name,
            price=product.price,
            original_price=product.original_price,
            image=product.image,
            rating=product.rating,
            reviews=product.reviews,
            category=product.category,
            description=product.description,
            stock=product.stock,
            specifications=dict(product.specifications),
            created_at=product.created_at,
        )

    def _to_domain(self, row: ProductRow) -> Product:
        """
        Convert database model (ProductRow) to domain entity (Product).

        Backends without timezone support hand back naive datetimes; those
        are stored as UTC.
        """
        created_at = row.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Product(
            id=row.id,
            name=row.name,
            price=row.price,  # Already Decimal from NUMERIC column
            original_price=row.original_price,
            image=row.image,
            rating=float(row.rating),
            reviews=row.reviews,
            category=row.category,
            description=row.description,
            stock=row.stock,
            specifications=dict(row.specifications or {}),
            created_at=created_at,
        )
