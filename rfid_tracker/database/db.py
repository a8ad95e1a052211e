import logging
import os
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from rfid_tracker import cli_args
from rfid_tracker.database.models import Base

Session_factory: sessionmaker | None = None


def get_alembic_config(db_url: str):
    from alembic.config import Config

    # Migrations ship inside the package; no alembic.ini is needed at runtime.
    scripts_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "alembic_db"))

    config = Config()
    config.set_main_option("script_location", scripts_path)
    config.set_main_option("sqlalchemy.url", db_url)
    return config


def _is_memory_url(db_url: str) -> bool:
    return db_url.startswith("sqlite") and ":memory:" in db_url


def init_db(db_url: str | None = None) -> Engine:
    """Create the engine and bring the schema to head."""
    global Session_factory

    db_url = db_url or cli_args.args.database_url
    engine = create_engine(db_url)

    if _is_memory_url(db_url):
        # Alembic would migrate a different connection's private database.
        Base.metadata.create_all(engine)
    else:
        from alembic import command

        config = get_alembic_config(db_url)
        logging.info("Upgrading database schema at %s", engine.url.render_as_string(hide_password=True))
        command.upgrade(config, "head")

    Session_factory = sessionmaker(bind=engine)
    return engine


@contextmanager
def create_session():
    if Session_factory is None:
        init_db()
    session: Session = Session_factory()
    try:
        yield session
    finally:
        session.close()
