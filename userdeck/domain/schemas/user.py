"""Pydantic schemas for the User domain."""

from typing import Optional

from pydantic import BaseModel


class UserCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    photo: Optional[str] = None


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    photo: Optional[str] = None

    model_config = {"from_attributes": True}
