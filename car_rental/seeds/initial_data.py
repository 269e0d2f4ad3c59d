import logging
from sqlalchemy.orm import Session

from car_rental.db.session import SessionLocal, engine
from car_rental.models import Base, User, UserRole

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    {"email": "admin@example.com", "name": "System Administrator", "role": UserRole.ADMIN},
    {"email": "vendor@example.com", "name": "Demo Vendor", "role": UserRole.VENDOR},
    {"email": "renter@example.com", "name": "Demo Renter", "role": UserRole.RENTER},
]

def seed_database(db: Session) -> list[User]:
    """Create the default users that do not exist yet. Returns the users created."""
    created = []
    try:
        for data in DEFAULT_USERS:
            user = db.query(User).filter(User.email == data["email"]).first()
            if user:
                logger.info(f"User {data['email']} already exists.")
                continue
            logger.info(f"Creating {data['role'].value} user {data['email']}...")
            user = User(is_active=True, **data)
            db.add(user)
            created.append(user)

        db.commit()
        logger.info("Seeding complete.")
    except Exception as e:
        logger.error(f"An error occurred during seeding: {e}")
        db.rollback()
        raise
    return created

if __name__ == "__main__":
    # Run from the project root:
    # python -m car_rental.seeds.initial_data
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()
