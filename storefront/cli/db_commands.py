# storefront/cli/db_commands.py
import logging

import click
from flask.cli import AppGroup

from storefront.core.flask_container import resolve
from storefront.core.interfaces import ICustomerRepository, IConfigProvider, IUserRepository
from storefront.database.database import init_db

db_cli = AppGroup("db")
logger = logging.getLogger(__name__)

DEMO_USER_NAME = "Demo User"
DEMO_USER_EMAIL = "demo@example.com"


@db_cli.command("init")
def db_init():
    """Create the database schema."""
    db_path = resolve(IConfigProvider).get_required("DATABASE_PATH")
    init_db(db_path)
    logger.info("Database initialized at %s", db_path)
    click.echo(f"Initialized database at {db_path}")


@db_cli.command("seed")
@click.option("--customers", "count", default=5, show_default=True)
def db_seed(count):
    """Insert a demo user and COUNT customers."""
    users = resolve(IUserRepository)
    customers = resolve(ICustomerRepository)

    user = users.find_by_email(DEMO_USER_EMAIL)
    user_id = user["id"] if user else users.create(DEMO_USER_NAME, DEMO_USER_EMAIL)

    for n in range(1, count + 1):
        customers.create(f"Customer {n}", user_id=user_id)

    logger.info("Seeded %d customer(s) for user %s", count, user_id)
    click.echo(f"Seeded {count} customer(s)")
