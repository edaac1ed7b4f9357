from typing import Any, Dict, List, Optional
from pymongo.results import InsertOneResult
from app.database.mongo import MongoGateway
from app.utils.bson_utils import parse_object_id


async def list_jobs(mongo: MongoGateway, email: Optional[str] = None) -> List[Dict[str, Any]]:
    """채용공고 전체 조회. email이 주어지면 hr_email이 일치하는 공고만"""
    query = {"hr_email": email} if email else {}
    return await mongo.jobs.find(query).to_list(length=None)


async def get_job(mongo: MongoGateway, job_id: str) -> Optional[Dict[str, Any]]:
    """
    채용공고 단건 조회.
    ObjectId 형식이 아니면 DB 조회 없이 None (존재하지 않는 공고와 동일하게 취급)
    """
    object_id = parse_object_id(job_id)
    if object_id is None:
        return None
    return await mongo.jobs.find_one({"_id": object_id})


async def create_job(mongo: MongoGateway, job: Dict[str, Any]) -> InsertOneResult:
    # 중복 검사 없이 그대로 저장 (applicationCount는 지원서 생성 시에만 증가)
    return await mongo.jobs.insert_one(job)
