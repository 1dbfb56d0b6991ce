"""
Product repository.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from domain.entities.product import Product
from domain.interfaces import IProductLookup
from models import ProductModel
from .base_repository import BaseRepository


class ProductRepository(BaseRepository[ProductModel], IProductLookup):
    """Repository for Product persistence."""

    def __init__(self, db: Session):
        super().__init__(db, ProductModel)

    def find_product_by_id(self, product_id: int) -> Optional[Product]:
        row = self.get_by_id(product_id)
        return row.to_entity() if row else None

    def save(self, product: Product) -> Product:
        """
        Insert a new product.

        Returns:
            Product with its assigned id
        """
        row = self.add(ProductModel(name=product.name, price=product.price.amount))
        return row.to_entity()

    def list_products(self, limit: Optional[int] = None, offset: int = 0) -> List[Product]:
        return [row.to_entity() for row in self.get_all(limit=limit, offset=offset)]
