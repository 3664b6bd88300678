"""Main CLI application module."""

import typer

from .db_commands import db_app
from .dev_commands import start_server
from .product_commands import products_app

# Create the main CLI application
app = typer.Typer(
    help="🛠️  Product Catalog CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="start-server")(start_server)
app.add_typer(db_app, name="db")
app.add_typer(products_app, name="products")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
