"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Product Services
from .product.product_catalog import ProductCatalogService

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Product Services
    "ProductCatalogService",
]
