"""CLI commands for browsing the product catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_catalog
from storefront.infrastructure.config import Settings


@click.command("products")
def products_list() -> None:
    """List all products in the catalog."""
    try:
        products = product_catalog(Settings.from_env()).list_all()
    except (DomainException, ValueError) as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Name':<30} {'Price':>10}")
    click.echo("-" * 68)
    for p in products:
        click.echo(f"{p.id:<26} {p.name:<30} {str(p.price):>10}")
