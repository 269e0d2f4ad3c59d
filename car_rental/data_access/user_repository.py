from sqlalchemy.orm import Session

from car_rental.models import User
from .base_repository import BaseRepository

class UserRepository(BaseRepository[User]):
    def get_by_email(self, db: Session, *, email: str) -> User | None:
        return db.query(User).filter(User.email == email).first()

user_repo = UserRepository(User)
