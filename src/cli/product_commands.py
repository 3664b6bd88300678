"""Product catalog CLI commands."""

import typer
from rich.table import Table

from src.catalog.core.query import PageRequest
from src.catalog.core.services import DbSessionService, ProductCatalogService
from src.catalog.runtime.context import get_config

from .utils import console

products_app = typer.Typer(help="📦 Browse the product catalog")


@products_app.command("list")
def list_products(
    search: str | None = typer.Option(None, "--search", "-s", help="Filter by name or description"),
    sort_column: str = typer.Option("id", "--sort-column", help="id, name or price"),
    sort_order: str = typer.Option("asc", "--sort-order", help="asc or desc"),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    page_size: int | None = typer.Option(None, "--page-size", min=1, help="Items per page"),
) -> None:
    """List one page of products."""
    request = PageRequest(
        search=search,
        sort_column=sort_column,
        sort_order=sort_order,
        page=page,
        page_size=page_size or get_config().catalog.default_page_size,
    )

    db_service = DbSessionService()
    try:
        with db_service.session_scope() as session:
            result = ProductCatalogService(session).list_products(request)
    finally:
        db_service.dispose()

    if not result.items:
        console.print(
            f"[yellow]No products on page {result.page} "
            f"({result.total_count} matching)[/yellow]"
        )
        return

    table = Table(
        title=f"Products: page {result.page}, {result.total_count} matching"
    )
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Price", style="magenta", justify="right")
    table.add_column("Description", style="blue")

    for product in result.items:
        table.add_row(
            str(product.id),
            product.name,
            f"{product.price:.2f}",
            product.description or "",
        )

    console.print(table)
