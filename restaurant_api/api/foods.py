"""
Food catalog API router
"""
import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from restaurant_api.api.deps import ensure_owner, get_current_user, parse_object_id
from restaurant_api.core.database import Database, get_db
from restaurant_api.models.common import (
    CascadeDeleteResult, InsertResult, UpdateResult, insert_result, update_result
)
from restaurant_api.models.food import (
    Food, FoodBase, FoodCreate, FoodPage, FoodStockUpdate, UserFoodPage
)
from restaurant_api.services.query import (
    POPULAR_LIMIT, build_food_query, build_pagination
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["foods"])


@router.get("/all-foods", response_model=FoodPage)
def get_all_foods(
    page: Optional[str] = None,
    size: Optional[str] = None,
    search: Optional[str] = None,
    filter: Optional[str] = None,
    db: Database = Depends(get_db),
) -> Any:
    """Paginated food listing with optional name search and price sort"""
    food_query = build_food_query(page, size, search, filter)
    try:
        cursor = db.foods.find(food_query.filter)
        if food_query.sort:
            cursor = cursor.sort(food_query.sort)
        all_foods = list(cursor.skip(food_query.pagination.skip).limit(food_query.pagination.limit))

        # Searches report the size of the returned page, not a total
        if food_query.is_search:
            count = len(all_foods)
        else:
            count = db.foods.estimated_document_count()
    except PyMongoError as e:
        logger.error(f"Error listing foods: {e}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": str(e)})

    return {"allFoods": all_foods, "count": count}


@router.get("/popular-foods", response_model=List[Food])
def get_popular_foods(db: Database = Depends(get_db)) -> Any:
    """Top foods by order count"""
    return list(db.foods.find({}).sort("orderCount", -1).limit(POPULAR_LIMIT))


@router.get("/single-food/{id}", response_model=Optional[Food])
def get_single_food(
    user: Dict[str, Any] = Depends(get_current_user),
    food_id: ObjectId = Depends(parse_object_id),
    db: Database = Depends(get_db),
) -> Any:
    """One food by id, or null"""
    return db.foods.find_one({"_id": food_id})


@router.get("/user/added-foods", response_model=UserFoodPage)
def get_user_added_foods(
    email: Optional[str] = None,
    page: Optional[str] = None,
    size: Optional[str] = None,
    user: Dict[str, Any] = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> Any:
    """Foods listed by the signed-in user"""
    ensure_owner(user, email)
    query = {"userEmail": email}
    pagination = build_pagination(page, size)
    foods = list(db.foods.find(query).skip(pagination.skip).limit(pagination.limit))
    return {"foodUserAdd": foods, "count": db.foods.count_documents(query)}


@router.post("/add-a-food", response_model=InsertResult)
def add_food(food: FoodCreate, db: Database = Depends(get_db)) -> Any:
    """Insert a new food listing"""
    result = db.foods.insert_one(food.model_dump(by_alias=True))
    logger.info(f"Added food {result.inserted_id}")
    return insert_result(result)


@router.patch("/update-all-food/{id}", response_model=UpdateResult)
def update_food_stock(
    stock: FoodStockUpdate,
    food_id: ObjectId = Depends(parse_object_id),
    db: Database = Depends(get_db),
) -> Any:
    """Set the remaining quantity and/or order count after an order"""
    updates = stock.model_dump(by_alias=True, exclude_none=True)
    if not updates:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="nothing to update")
    result = db.foods.update_one({"_id": food_id}, {"$set": updates})
    logger.info(f"Updated stock of food {food_id}: {updates}")
    return update_result(result)


@router.put("/user/update-added-food/{id}", response_model=UpdateResult)
def upsert_food(
    food: FoodBase,
    food_id: ObjectId = Depends(parse_object_id),
    db: Database = Depends(get_db),
) -> Any:
    """Replace the listing fields, creating the food if the id is unknown"""
    result = db.foods.update_one(
        {"_id": food_id},
        {"$set": food.model_dump(by_alias=True), "$setOnInsert": {"orderCount": 0}},
        upsert=True,
    )
    logger.info(f"Upserted food {food_id}")
    return update_result(result)


@router.delete("/user/delete-a-added-food/{id}", response_model=CascadeDeleteResult)
def delete_food(food_id: ObjectId = Depends(parse_object_id), db: Database = Depends(get_db)) -> Any:
    """Delete a food and the cart entries pointing at it.

    The two deletes are independent writes; an interrupted call can leave
    cart entries behind, which ``purge_orphaned_cart_entries`` removes.
    """
    result = db.foods.delete_one({"_id": food_id})
    cart_result = db.cart.delete_many({"foodId": str(food_id)})
    logger.info(f"Deleted food {food_id} and {cart_result.deleted_count} cart entries")
    return CascadeDeleteResult(
        acknowledged=result.acknowledged,
        deleted_count=result.deleted_count,
        cart_deleted_count=cart_result.deleted_count,
    )
