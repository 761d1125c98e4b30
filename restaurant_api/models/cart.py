"""
Cart schemas
"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import Field

from restaurant_api.models.common import CamelModel, PyObjectId


class CartEntryCreate(CamelModel):
    user_email: str
    food_id: str
    quantity: int = Field(1, ge=1)
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    name: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None


class CartEntry(CamelModel):
    id: PyObjectId = Field(alias="_id")
    user_email: Optional[str] = None
    food_id: Optional[str] = None
    quantity: Optional[int] = None
    added_at: Optional[datetime] = None
    name: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None


class CartPage(CamelModel):
    orders: List[CartEntry]
