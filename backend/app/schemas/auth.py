from pydantic import BaseModel


class LoginResponse(BaseModel):
    success: bool
    token: str


class SuccessResponse(BaseModel):
    success: bool = True
