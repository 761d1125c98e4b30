"""
Cart API router
"""
import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from fastapi import APIRouter, Depends

from restaurant_api.api.deps import ensure_owner, get_current_user, parse_object_id
from restaurant_api.core.database import Database, get_db
from restaurant_api.models.cart import CartEntryCreate, CartPage
from restaurant_api.models.common import DeleteResult, InsertResult, delete_result, insert_result

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cart"])


@router.get("/cart", response_model=CartPage)
def get_cart(
    email: Optional[str] = None,
    user: Dict[str, Any] = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> Any:
    """Cart entries of the signed-in user"""
    ensure_owner(user, email)
    return {"orders": list(db.cart.find({"userEmail": email}))}


@router.post("/food-orders", response_model=InsertResult)
def add_to_cart(entry: CartEntryCreate, db: Database = Depends(get_db)) -> Any:
    """Add an ordered food to the user's cart"""
    result = db.cart.insert_one(entry.model_dump(by_alias=True))
    logger.info(f"Added cart entry {result.inserted_id} for food {entry.food_id}")
    return insert_result(result)


@router.delete("/user/delete-a-cart-food/{id}", response_model=DeleteResult)
def delete_cart_entry(entry_id: ObjectId = Depends(parse_object_id), db: Database = Depends(get_db)) -> Any:
    """Remove a single cart entry; the food itself is untouched"""
    result = db.cart.delete_one({"_id": entry_id})
    logger.info(f"Deleted cart entry {entry_id}")
    return delete_result(result)
