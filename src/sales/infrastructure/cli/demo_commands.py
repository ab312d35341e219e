"""CLI command that runs the sample sales flow end to end.

State is in memory only, so the whole flow happens within one command:
register a customer and two products, open an order, add two lines and
print the result.
"""

from __future__ import annotations

import logging

import click

from sales.application.dto import OrderDTO
from sales.domain.exceptions import DomainException
from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money
from sales.infrastructure.bootstrap import build_services
from sales.infrastructure.config import Settings

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    ("sku-001", "Cafeteira", "199.90"),
    ("sku-002", "Xícara", "9.90"),
]
SAMPLE_LINES = [
    ("sku-001", 1),
    ("sku-002", 4),
]


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}")
    click.echo(f"Customer: {dto.customer_name} ({dto.customer_id})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*48}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.subtotal:>10}"
        )
    click.echo(f"  {'-'*48}")
    click.echo(f"  {'Order Total':<27} {dto.total:>21}")


@click.command("demo")
@click.option("--customer-id", default="cli-001", show_default=True, help="Customer ID.")
@click.option("--customer-name", default="João Silva", show_default=True, help="Customer name.")
@click.option("--email", default="joao@example.com", show_default=True, help="Customer e-mail.")
@click.pass_obj
def demo(settings: Settings | None, customer_id: str, customer_name: str, email: str) -> None:
    """Run the sample flow: one customer, two products, one order."""
    currency = settings.currency if settings is not None else "USD"
    services = build_services(currency)

    try:
        services.customers.create_customer(
            Customer(id=customer_id, name=customer_name, email=email)
        )
        for sku, name, price in SAMPLE_PRODUCTS:
            services.products.create_product(
                Product(sku=sku, name=name, unit_price=Money.of(price, currency))
            )

        order = services.orders.create_order(customer_id)
        logger.info("Created order %s for customer %s", order.id, customer_id)
        for sku, quantity in SAMPLE_LINES:
            order = services.orders.add_line_to_order(order.id, sku, quantity)
            logger.debug("Added %d x %s to order %s", quantity, sku, order.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(OrderDTO.from_order(order))
