"""Catalog domain exceptions.

Raised by repositories and services. The HTTP routers translate them into
responses: validation -> 400, not found -> 404, store failures -> 500.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class ProductValidationError(CatalogError):
    """The request payload is inconsistent with the request itself."""


class ProductNotFoundError(CatalogError):
    """The requested product does not exist."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class ConcurrentModificationError(CatalogError):
    """An update matched no row although the product was expected to exist."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} was modified or removed concurrently")
        self.product_id = product_id


class StoreFailureError(CatalogError):
    """Any other persistence failure."""
