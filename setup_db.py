'''
----------------------------
Create database and tables
DESTRUCTIVE: drops every existing table first
Run directly (python setup_db.py) or via "flask init-db"
----------------------------
'''

import logging

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from db import db
# Registers the tables on db.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)


def setup_database(app):
    with app.app_context():
        try:
            db.session.execute(text("SELECT 1"))
            logger.info("Connection to database established successfully.")

            db.drop_all()
            db.create_all()
            logger.info("Database and tables created successfully.")
            return True
        except SQLAlchemyError as e:
            logger.error("Unable to set up the database: %s", e)
            return False
        finally:
            db.session.remove()


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Drop and recreate all tables."""
    if not setup_database(current_app._get_current_object()):
        raise click.ClickException("Database setup failed")
    click.echo("Database and tables created successfully.")


if __name__ == "__main__":
    from app import create_app

    setup_database(create_app())
