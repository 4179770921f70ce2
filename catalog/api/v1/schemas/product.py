# catalog/api/v1/schemas/product.py
from pydantic import BaseModel


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str
