from typing import Any, Optional
from bson import ObjectId
from fastapi.encoders import jsonable_encoder


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """유효한 ObjectId 문자열이면 변환, 아니면 None"""
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def serialize_document(document: Any) -> Any:
    """MongoDB 문서(또는 문서 리스트)를 JSON 응답용으로 변환. ObjectId는 hex 문자열로"""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})
