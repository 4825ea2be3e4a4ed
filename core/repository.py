"""Repository pattern base class for database operations.

Provides common CRUD operations and the recipe-specific queries used by the
SQL-backed recipe store and the catalog ingestion script.
"""

from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any
from database.models import Base, Recipe

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        """Initialize repository with model and session.

        Args:
            model: SQLAlchemy model class.
            session: Database session.
        """
        self.model = model
        self.session = session

    def create_many(self, objects: List[T]) -> List[T]:
        """Add multiple objects, commit and refresh all.

        Args:
            objects: List of model instances to persist.

        Returns:
            List of persisted objects with refreshed attributes.
        """
        self.session.add_all(objects)
        self.session.commit()
        for obj in objects:
            self.session.refresh(obj)
        return objects

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key.

        Args:
            id: Primary key value.

        Returns:
            Model instance or None if not found.
        """
        return self.session.get(self.model, id)

    def count(self) -> int:
        """Count total number of records.

        Returns:
            Total count of model instances.
        """
        return self.session.query(self.model).count()


class RecipeRepository(BaseRepository[Recipe]):
    """Recipe catalog queries.

    Only column-level constraints are pushed into SQL; list-valued fields are
    JSON text and get filtered by the caller after loading.
    """

    def __init__(self, session: Session):
        super().__init__(Recipe, session)

    def find_by_name(self, name: str) -> Optional[Recipe]:
        return self.session.query(Recipe).filter(Recipe.name == name).first()

    def list_candidates(
        self,
        approved: Optional[bool] = None,
        max_prep_time: Optional[int] = None,
        min_calories: Optional[int] = None,
        max_calories: Optional[int] = None,
    ) -> List[Recipe]:
        """Return recipes matching the SQL-expressible part of a filter."""
        query = self.session.query(Recipe)
        if approved is not None:
            query = query.filter(Recipe.is_approved == approved)
        if max_prep_time is not None:
            query = query.filter(Recipe.prep_time_minutes <= max_prep_time)
        if min_calories is not None:
            query = query.filter(Recipe.calories_kcal >= min_calories)
        if max_calories is not None:
            query = query.filter(Recipe.calories_kcal <= max_calories)
        return query.order_by(Recipe.creation_timestamp.desc(), Recipe.name).all()
