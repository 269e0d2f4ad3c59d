from pydantic import BaseModel

class TokenPayloadSchema(BaseModel):
    sub: str  # Subject - the caller's email
