"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Query, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.query import PageRequest
from src.catalog.core.services import DbSessionService, ProductCatalogService
from src.catalog.runtime.context import get_config


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Open a database session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_catalog_service(
    db_session: Session = Depends(get_db_session),
) -> ProductCatalogService:
    """Get the Product Catalog service instance."""
    return ProductCatalogService(db_session)


def get_page_request(
    search: str | None = Query(default=None),
    sort_column: str | None = Query(default="id", alias="sortColumn"),
    sort_order: str | None = Query(default="asc", alias="sortOrder"),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, alias="pageSize"),
) -> PageRequest:
    """Build a PageRequest from the list endpoint's query string."""
    return PageRequest(
        search=search,
        sort_column=sort_column,
        sort_order=sort_order,
        page=page,
        page_size=page_size or get_config().catalog.default_page_size,
    )
