"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and a simple `init_db` helper that
creates tables and seeds the recipe catalog when the DB is empty.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from core.config import settings
from core.logger import get_logger
from .models import Base, Recipe
from data.recipes_dataset import RECIPES_DATA

logger = get_logger("database")

# Read/Write partitioning pattern
# For SQLite/demo both URLs default to the same file but the interfaces are separated.
WRITE_DATABASE_URL = settings.write_database_url
READ_DATABASE_URL = settings.read_database_url


def _connect_args(url: str) -> dict:
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args=_connect_args(WRITE_DATABASE_URL))
read_engine = create_engine(READ_DATABASE_URL, connect_args=_connect_args(READ_DATABASE_URL))

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def init_db(seed: bool = None):
    """Initialize database schema and seed recipes.

    Creates all tables using SQLAlchemy models and populates the recipes
    table with the starter catalog if the table is empty.
    """
    if seed is None:
        seed = settings.seed_recipes
    Base.metadata.create_all(bind=write_engine)
    if not seed:
        return
    # Imported here: core.repository imports this package's models
    from core.repository import RecipeRepository

    session = WriteSessionLocal()
    try:
        repository = RecipeRepository(session)
        if repository.count() == 0:
            repository.create_many([Recipe.from_dict(item) for item in RECIPES_DATA])
            logger.info("Seeded %s recipes into empty catalog", len(RECIPES_DATA))
    finally:
        session.close()


# Convenience generator for dependency injection
def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
