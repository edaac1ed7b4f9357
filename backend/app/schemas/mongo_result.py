from pydantic import BaseModel, Field
from typing import Optional
from pymongo.results import InsertOneResult, UpdateResult


class InsertResultResponse(BaseModel):
    """insert_one 결과 응답 스키마"""
    acknowledged: bool = True
    inserted_id: str = Field(..., alias="insertedId", description="생성된 문서의 _id")

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResultResponse":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateResultResponse(BaseModel):
    """update_one 결과 응답 스키마"""
    acknowledged: bool = True
    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")
    upserted_count: int = Field(0, alias="upsertedCount")

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateResultResponse":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=str(upserted_id) if upserted_id is not None else None,
            upserted_count=1 if upserted_id is not None else 0,
        )
