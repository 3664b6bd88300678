"""Entity package: Product."""

from .entity import PRODUCT_SORT_KEYS, Product
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["PRODUCT_SORT_KEYS", "Product", "ProductRepository", "ProductTable"]
