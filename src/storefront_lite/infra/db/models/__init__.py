from storefront_lite.infra.db.models.base import Base
from storefront_lite.infra.db.models.cart_slot import CartSlotRow
from storefront_lite.infra.db.models.product import ProductRow

__all__ = ["Base", "CartSlotRow", "ProductRow"]
