import click

from sales.infrastructure.cli.demo_commands import demo
from sales.infrastructure.config import Settings
from sales.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ...). Overrides SALES_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Sales — customers, products and orders"""
    settings = Settings.from_env()
    setup_logging(log_level or settings.log_level, settings.log_file)
    ctx.obj = settings


# Register subcommands
cli.add_command(demo)
