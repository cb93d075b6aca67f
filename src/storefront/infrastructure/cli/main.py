import click

from storefront.infrastructure.cli.catalog_commands import products_list
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: browse products and place an order."""
    configure_logging()


# Register subcommands
cli.add_command(products_list)
cli.add_command(checkout)
