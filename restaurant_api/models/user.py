"""
User schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from restaurant_api.models.common import CamelModel, PyObjectId


class UserCreate(CamelModel):
    email: str = Field(..., min_length=3)
    name: Optional[str] = None
    photo: Optional[str] = None
    created_at: Optional[datetime] = None


class User(UserCreate):
    id: PyObjectId = Field(alias="_id")


class TokenRequest(CamelModel):
    """Identity claims to sign into the session cookie"""

    model_config = CamelModel.model_config | {"extra": "allow"}

    email: str = Field(..., min_length=3)
