# alembic/env.py

import os
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context
from dotenv import load_dotenv

load_dotenv()

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from techhub.core.config import get_settings
from techhub.database.database import get_base_metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = get_base_metadata()

# Same URL the application uses, .env included
url = get_settings().DATABASE_URL


def _configure_options() -> dict:
    return dict(
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite can't ALTER most column properties in place
        render_as_batch=url.startswith("sqlite"),
    )


def run_migrations_offline():
    """Emit the landing page schema as SQL without connecting."""
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options()
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Apply the landing page schema to the configured database."""
    connectable = engine_from_config(
        {'sqlalchemy.url': url},
        prefix='sqlalchemy.',
        poolclass=pool.NullPool
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_options())
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
