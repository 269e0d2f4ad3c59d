from pydantic import BaseModel, EmailStr

from car_rental.models import UserRole

# --- User Schemas ---

class UserReadSchema(BaseModel):
    id: int
    email: EmailStr
    name: str
    role: UserRole
    is_active: bool

    class Config:
        from_attributes = True
