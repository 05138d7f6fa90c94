"""Product catalog service."""
from typing import List, Optional
from sqlalchemy import select

from grocery.models import Product
from grocery.domain.types import ProductId
from .base_service import BaseService


class ProductService(BaseService):
    """Service for reading and updating catalog products."""

    def get_all(self) -> List[Product]:
        """Get every product in the catalog, ordered by ID."""
        return list(
            self.session.execute(
                select(Product).order_by(Product.id)
            ).scalars().all()
        )

    def get(self, product_id: ProductId) -> Optional[Product]:
        """Get a single product by ID."""
        return self.session.get(Product, product_id)

    def add(self, name: str, stock: int = 0) -> Product:
        """
        Add a product to the catalog.

        Args:
            name: Product name
            stock: Initial stock (default: 0)

        Returns:
            The stored product
        """
        if stock < 0:
            raise ValueError("Stock cannot be negative")

        product = Product(name=name.strip(), stock=stock)
        with self.transaction.transaction() as session:
            session.add(product)
            session.flush()
            product_id = product.id

        self._log_action("add_product", product_id=product_id, stock=stock)
        return product

    def update(self, product: Product) -> Product:
        """
        Persist changes to a product.

        Args:
            product: The product with its new values

        Returns:
            The stored product
        """
        with self.transaction.transaction() as session:
            product = session.merge(product)
            product_id, stock = product.id, product.stock

        self._log_action("update_product", product_id=product_id, stock=stock)
        return product
