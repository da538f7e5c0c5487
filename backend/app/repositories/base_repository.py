from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.orm import Session, Query
from app.db import Base

ModelType = TypeVar("ModelType", bound=Base)

class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations"""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def query(self) -> Query:
        return self.db.query(self.model)

    def get(self, id: Any) -> Optional[ModelType]:
        """Get by ID"""
        return self.db.get(self.model, id)

    def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """Create new object"""
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """Update object"""
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ModelType) -> None:
        """Delete object"""
        self.db.delete(db_obj)
        self.db.commit()

    def paginate(self, query: Query, skip: int, limit: int) -> List[ModelType]:
        return query.offset(skip).limit(limit).all()

    def filter_one_by(self, **kwargs) -> Optional[ModelType]:
        """Filter by multiple conditions and return first"""
        return self.query().filter_by(**kwargs).first()

    def exists(self, **kwargs) -> bool:
        """Check if object exists"""
        return self.filter_one_by(**kwargs) is not None
