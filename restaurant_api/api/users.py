"""
User registration API router
"""
import logging
from datetime import datetime, timezone
from typing import Any, Union

from fastapi import APIRouter, Depends

from restaurant_api.core.database import Database, get_db
from restaurant_api.models.common import InsertResult, insert_result
from restaurant_api.models.user import User, UserCreate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/add-a-user", response_model=Union[User, InsertResult])
def add_user(user_data: UserCreate, db: Database = Depends(get_db)) -> Any:
    """Register a user once per email; repeat calls echo the stored user"""
    existing_user = db.users.find_one({"email": user_data.email})
    if existing_user:
        return User.model_validate(existing_user)

    if user_data.created_at is None:
        user_data.created_at = datetime.now(timezone.utc)
    result = db.users.insert_one(user_data.model_dump(by_alias=True))
    logger.info(f"Registered user {result.inserted_id}")
    return insert_result(result)
