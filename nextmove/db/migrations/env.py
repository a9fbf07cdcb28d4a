import sys
from pathlib import Path

# Add project root to sys.path
root_dir = Path(__file__).resolve().parents[3]
sys.path.append(str(root_dir))

from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context
from nextmove.core.config import settings
from nextmove.db.base import Base
from nextmove.domain import models  # noqa: F401  (import models for metadata)

config = context.config
# SQL URL always comes from settings (.env)
config.set_main_option("sqlalchemy.url", settings.SQL_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def run_migrations_offline():
    url = config.get_main_option("sqlalchemy.url")
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix='sqlalchemy.',
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
