from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.catalog.core.exceptions import (
    CatalogError,
    ConcurrentModificationError,
    ProductNotFoundError,
    ProductValidationError,
    StoreFailureError,
)
from src.catalog.core.query import PageRequest, PageResult, run_page_query
from src.catalog.entities.service.product import (
    PRODUCT_SORT_KEYS,
    Product,
    ProductRepository,
)


class ProductCatalogService:
    """CRUD operations and paged listing over the product store."""

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._product_repo = ProductRepository(db_session)

    @contextmanager
    def _transaction(self, action: str) -> Iterator[None]:
        """Commit on success; roll back and classify failures otherwise."""
        try:
            yield
            self._db_session.commit()
        except CatalogError:
            self._db_session.rollback()
            raise
        except SQLAlchemyError as e:
            self._db_session.rollback()
            logger.bind(action=action, error_type=type(e).__name__).exception(
                "product.store_failure"
            )
            raise StoreFailureError(f"Failed to {action} product") from e

    def list_products(self, request: PageRequest) -> PageResult[Product]:
        """Return one page of products matching the request."""
        snapshot = self._product_repo.list_all()
        return run_page_query(
            snapshot,
            request,
            sort_keys=PRODUCT_SORT_KEYS,
            matches=Product.matches,
        )

    def get_product(self, product_id: int) -> Product:
        product = self._product_repo.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def create_product(self, product: Product) -> Product:
        """Insert a new product. Any id on the payload is ignored."""
        with self._transaction("create"):
            created = self._product_repo.create(product)
        logger.info("Created product {}", created.id)
        return created

    def update_product(self, product_id: int, product: Product) -> Product:
        """Replace a product's mutable fields.

        Raises:
            ProductValidationError: the payload id differs from ``product_id``.
            ProductNotFoundError: no product with ``product_id`` exists.
            StoreFailureError: the update failed although the product still exists.
        """
        if product.id != product_id:
            raise ProductValidationError(
                f"Path id {product_id} does not match payload id {product.id}"
            )

        try:
            with self._transaction("update"):
                updated = self._product_repo.update(product)
        except ConcurrentModificationError as e:
            # One existence probe decides between "gone" and a real failure
            if not self._product_repo.exists(product_id):
                raise ProductNotFoundError(product_id) from e
            logger.error("Update of product {} affected no rows but it still exists", product_id)
            raise StoreFailureError(f"Failed to update product {product_id}") from e

        logger.info("Updated product {}", product_id)
        return updated

    def delete_product(self, product_id: int) -> None:
        with self._transaction("delete"):
            deleted = self._product_repo.delete(product_id)
            if not deleted:
                raise ProductNotFoundError(product_id)
        logger.info("Deleted product {}", product_id)
