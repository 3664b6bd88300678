"""Database management CLI commands."""

import typer
from rich.prompt import Confirm

from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.entities.service.product import Product, ProductRepository

from .utils import console

db_app = typer.Typer(help="🗄️  Database commands")

SAMPLE_PRODUCTS = [
    Product(name="Widget", price=9.99, description="A small widget"),
    Product(name="Gadget", price=19.99, description="A handy gadget"),
    Product(name="Gizmo", price=4.5, description="Pocket-sized gizmo"),
    Product(name="Doohickey", price=12.0, description=None),
    Product(name="Thingamajig", price=29.95, description="Heavy-duty thingamajig"),
]


@db_app.command()
def init() -> None:
    """Create all database tables."""
    db_service = DbSessionService()
    try:
        DbManageService(db_service.engine).create_all()
    finally:
        db_service.dispose()
    console.print("[green]✅ Database tables created[/green]")


@db_app.command()
def seed() -> None:
    """Insert a handful of sample products."""
    db_service = DbSessionService()
    try:
        DbManageService(db_service.engine).create_all()
        with db_service.session_scope() as session:
            repository = ProductRepository(session)
            created = [repository.create(product) for product in SAMPLE_PRODUCTS]
    finally:
        db_service.dispose()
    console.print(f"[green]✅ Inserted {len(created)} sample products[/green]")


@db_app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop and recreate all tables."""
    if not yes and not Confirm.ask("[red]Drop all catalog data?[/red]"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=1)

    db_service = DbSessionService()
    try:
        manager = DbManageService(db_service.engine)
        manager.drop_all()
        manager.create_all()
    finally:
        db_service.dispose()
    console.print("[green]✅ Database reset[/green]")
