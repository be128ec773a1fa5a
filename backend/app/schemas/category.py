from pydantic import BaseModel
from typing import Optional


class CategoryResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class CategoryCreate(BaseModel):
    # Пустое имя проверяется в роутере, чтобы отдать своё сообщение
    name: Optional[str] = None
    password: Optional[str] = None
