"""
Product Service

Registers and lists products.
"""

from typing import List
from sqlalchemy.orm import Session

from domain.entities.product import Product
from dtos.request.product_request import ProductCreateRequest
from repositories.product_repository import ProductRepository
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class ProductService:
    """Service for product registration."""

    def __init__(self, db: Session):
        """
        Initialize ProductService.

        Args:
            db: Database session
        """
        self.db = db
        self.product_repo = ProductRepository(db)

    @log_operation("create_product")
    def create_product(self, request: ProductCreateRequest) -> Product:
        """
        Register a product.

        Raises:
            ValidationError: If the name is blank or the price is missing
                or negative
        """
        product = Product.create(request.name, request.price)
        saved = self.product_repo.save(product)
        self.db.commit()

        logger.info(f"Created product {saved.id} ({saved.name})", extra={"product_id": saved.id})
        return saved

    def list_products(self) -> List[Product]:
        return self.product_repo.list_products()
