"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations on ORM rows.

    Subclasses map rows to domain entities; nothing above the repository
    layer sees an ORM model.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def add(self, obj: T) -> T:
        """
        Insert a new row and flush so its primary key is assigned.

        Args:
            obj: Model instance to insert

        Returns:
            The same instance, with its id populated
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a row by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        if id is None:
            return None
        return self.db.get(self.model, id)

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """
        Retrieve all rows ordered by primary key.

        Args:
            limit: Maximum number of rows to return
            offset: Number of rows to skip

        Returns:
            List of model instances
        """
        query = self.db.query(self.model).order_by(self.model.id)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def count(self) -> int:
        """
        Count total rows.

        Returns:
            Total number of rows
        """
        return self.db.query(self.model).count()
