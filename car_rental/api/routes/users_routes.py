from fastapi import APIRouter, Depends

from car_rental import schemas
from car_rental.api import dependencies
from car_rental import models

router = APIRouter()

@router.get("/me", response_model=schemas.user_schemas.UserReadSchema)
def read_users_me(
    current_user: models.User = Depends(dependencies.get_current_active_user)
):
    return current_user
