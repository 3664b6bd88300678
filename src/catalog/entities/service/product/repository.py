"""Product repository."""

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlmodel import Session, select

from src.catalog.core.exceptions import ConcurrentModificationError
from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def exists(self, product_id: int) -> bool:
        statement = select(ProductTable.id).where(ProductTable.id == product_id)
        return self._session.exec(statement).first() is not None

    def list_all(self) -> list[Product]:
        """Snapshot of every product in primary-key order."""
        statement = select(ProductTable).order_by(ProductTable.id)
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def create(self, product: Product) -> Product:
        """Insert a product; the store assigns the id."""
        row = ProductTable(
            name=product.name,
            price=product.price,
            description=product.description,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def update(self, product: Product) -> Product:
        """Replace the mutable fields of an existing product.

        Raises:
            ConcurrentModificationError: if no row with the product's id was updated.
        """
        statement = (
            sa.update(ProductTable)
            .where(ProductTable.id == product.id)
            .values(
                name=product.name,
                price=product.price,
                description=product.description,
                updated_at=datetime.now(UTC),
            )
        )
        result = self._session.execute(statement)
        if result.rowcount == 0:
            raise ConcurrentModificationError(product.id)
        return product.model_copy()

    def delete(self, product_id: int) -> bool:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
