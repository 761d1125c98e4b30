"""
Food listing schemas
"""
from typing import List, Optional

from pydantic import Field

from restaurant_api.models.common import CamelModel, PyObjectId


class FoodBase(CamelModel):
    name: str = Field(..., min_length=1)
    category: str = ""
    origin: str = ""
    price: float = Field(..., ge=0)
    quantity: int = Field(0, ge=0)
    image: str = ""
    description: str = ""
    user_name: Optional[str] = None
    user_email: str


class FoodCreate(FoodBase):
    order_count: int = Field(0, ge=0)


class FoodStockUpdate(CamelModel):
    """Fields touched when an order is placed"""

    quantity: Optional[int] = Field(None, ge=0)
    order_count: Optional[int] = Field(None, ge=0)


class Food(CamelModel):
    id: PyObjectId = Field(alias="_id")
    name: Optional[str] = None
    category: Optional[str] = None
    origin: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    image: Optional[str] = None
    description: Optional[str] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    order_count: int = 0


class FoodPage(CamelModel):
    all_foods: List[Food]
    count: int


class UserFoodPage(CamelModel):
    food_user_add: List[Food]
    count: int
