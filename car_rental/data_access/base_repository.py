from typing import Any, Generic, Type, TypeVar, Optional, Protocol
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

class SQLAlchemyModel(Protocol):
    id: Any

ModelType = TypeVar("ModelType", bound=SQLAlchemyModel)

class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        """
        Base class for data access repositories.
        Provides default lookup, save and delete operations.
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def save(self, db: Session, db_obj: ModelType) -> ModelType:
        """Insert or update ``db_obj`` and return it with generated columns loaded."""
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, db_obj: ModelType) -> None:
        db.delete(db_obj)
        db.commit()
