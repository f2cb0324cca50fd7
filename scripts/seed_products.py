#!/usr/bin/env python3
"""
Seed the products table with the demo catalog.

Features:
- Deterministic: the same six products, ids "1".."6", every run
- Idempotent: safe to run multiple times (clears before seeding)
- Catalog order is insertion order, so the featured sort matches the
  in-memory store

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_products.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from storefront_lite.adapters.sqlalchemy_product_catalog_repository import (
    SqlAlchemyProductCatalogRepository,
)
from storefront_lite.infra.db.models.product import ProductRow
from storefront_lite.infra.db.session import get_session
from storefront_lite.infra.seed_catalog import default_catalog


def seed_products() -> None:
    products = default_catalog()

    print(f"🌱 Seeding database with {len(products)} products...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing products...")
        deleted_count = session.query(ProductRow).delete()
        print(f"   Deleted {deleted_count} existing products")

        # Step 2: Insert through the repository so rows match what the API writes
        repository = SqlAlchemyProductCatalogRepository(session=session)
        for product in products:
            repository.add(product)

        print(f"✅ Successfully seeded {len(products)} products!")

        print("\n📊 Catalog:")
        for product in products:
            status = "in stock" if product.in_stock else "out of stock"
            print(f"   {product.id}. {product.name} - ${product.price:,.2f} ({product.category}, {status})")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_products()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
