from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError

from car_rental.core import security
from car_rental.db.session import get_db
from car_rental.data_access import user_repo
from car_rental.models import User
from car_rental.schemas import token_schemas

http_bearer_scheme = HTTPBearer()

def get_current_user_email(
    auth: HTTPAuthorizationCredentials = Depends(http_bearer_scheme),
) -> str:
    """
    Dependency to get the caller's email from a Bearer token.
    The token is verified here; resolving the email to a user is left
    to the service so it can report an unknown caller itself.
    """
    try:
        payload = security.decode_access_token(auth.credentials)
        email: str | None = payload.get("sub")
        if email is None:
            raise security.CREDENTIALS_EXCEPTION
        token_data = token_schemas.TokenPayloadSchema(sub=email)
    except JWTError:
        raise security.CREDENTIALS_EXCEPTION
    return token_data.sub

def get_current_user(
    email: str = Depends(get_current_user_email),
    db: Session = Depends(get_db)
) -> User:
    """
    Dependency to get the current user from a Bearer token.
    """
    user = user_repo.get_by_email(db, email=email)
    if user is None:
        raise security.CREDENTIALS_EXCEPTION
    return user

def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """
    A further dependency that checks if the user is active.
    """
    if not current_user.is_active:  # type: ignore
        raise HTTPException(status_code=400, detail="Inactive user")
    return current_user

def get_active_caller_email(
    email: str = Depends(get_current_user_email),
    db: Session = Depends(get_db)
) -> str:
    """
    The email of an authenticated caller, as the vehicle service expects it.
    Unknown emails pass through so the service reports them; known but
    inactive users are refused here.
    """
    user = user_repo.get_by_email(db, email=email)
    if user is not None and not user.is_active:  # type: ignore
        raise HTTPException(status_code=400, detail="Inactive user")
    return email
