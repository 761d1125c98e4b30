"""
Shared schemas: document ids and write results
"""
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

# ObjectId values leave the API as hex strings
PyObjectId = Annotated[str, BeforeValidator(str)]


class CamelModel(BaseModel):
    """Base schema whose JSON keys are camelCase, as stored in the collections"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsertResult(CamelModel):
    acknowledged: bool
    inserted_id: PyObjectId


class UpdateResult(CamelModel):
    acknowledged: bool
    matched_count: int
    modified_count: int
    upserted_id: Optional[PyObjectId] = None


class DeleteResult(CamelModel):
    acknowledged: bool
    deleted_count: int


class CascadeDeleteResult(DeleteResult):
    cart_deleted_count: int = 0


class Message(BaseModel):
    success: bool = True


def insert_result(result) -> InsertResult:
    return InsertResult(acknowledged=result.acknowledged, inserted_id=result.inserted_id)


def update_result(result) -> UpdateResult:
    return UpdateResult(
        acknowledged=result.acknowledged,
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        upserted_id=result.upserted_id,
    )


def delete_result(result) -> DeleteResult:
    return DeleteResult(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
