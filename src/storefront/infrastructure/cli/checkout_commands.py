"""CLI command that fills a cart and places a single order."""

from __future__ import annotations

import asyncio

import click

from storefront.application.dto import SessionView
from storefront.domain.exceptions import DomainException
from storefront.domain.model.address import AddressField
from storefront.infrastructure.bootstrap import storefront_session
from storefront.infrastructure.config import Settings


def _display_cart(view: SessionView) -> None:
    """Shared formatting for the cart summary."""
    click.echo(f"Cart ({view.count} items, {view.unit_count} units)")
    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*57}")
    for line in view.lines:
        click.echo(
            f"  {line.name:<30} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*57}")
    click.echo(f"  {'Total':<30} {view.total:>26}")


@click.command("checkout")
@click.option("--add", "add_ids", multiple=True, help="Product ID to add; repeat for more units.")
@click.option("--remove", "remove_ids", multiple=True, help="Product ID to drop from the cart.")
@click.option("--street", default="", help="Street address.")
@click.option("--city", default="", help="City.")
@click.option("--state", default="", help="State.")
@click.option("--zip-code", "zip_code", default="", help="ZIP code.")
@click.option("--country", default="", help="Country.")
@click.option("--dry-run", is_flag=True, default=False, help="Show the cart without placing the order.")
def checkout(
    add_ids: tuple[str, ...],
    remove_ids: tuple[str, ...],
    street: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
    dry_run: bool,
) -> None:
    """Build a cart and place the order."""
    try:
        session = storefront_session(Settings.from_env())
    except (DomainException, ValueError) as exc:
        raise click.ClickException(str(exc))

    address = {
        AddressField.STREET: street,
        AddressField.CITY: city,
        AddressField.STATE: state,
        AddressField.ZIP_CODE: zip_code,
        AddressField.COUNTRY: country,
    }

    try:
        for product_id in add_ids:
            session.add_item(product_id)
        for product_id in remove_ids:
            session.remove_item(product_id)
        for field, value in address.items():
            session.update_address_field(field, value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    view = session.view()
    _display_cart(view)

    if dry_run:
        if view.missing_fields:
            click.echo(f"Missing address fields: {', '.join(view.missing_fields)}")
        else:
            click.echo("Ready to place order.")
        return

    result = asyncio.run(session.submit_order())
    if not result.ok:
        raise click.ClickException(result.message)

    click.echo(result.message)
