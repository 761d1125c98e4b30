"""
Maintenance for references that have no foreign key behind them
"""
import logging

from restaurant_api.core.database import Database

logger = logging.getLogger(__name__)


def purge_orphaned_cart_entries(db: Database) -> int:
    """Delete cart entries whose food no longer exists.

    Safe to run repeatedly; it finishes the cart half of a food deletion that
    was interrupted between its two writes.
    """
    food_ids = {str(food["_id"]) for food in db.foods.find({}, {"_id": 1})}
    orphan_ids = [
        entry["_id"]
        for entry in db.cart.find({}, {"foodId": 1})
        if entry.get("foodId") not in food_ids
    ]
    if not orphan_ids:
        return 0

    result = db.cart.delete_many({"_id": {"$in": orphan_ids}})
    logger.info(f"Purged {result.deleted_count} orphaned cart entries")
    return result.deleted_count
