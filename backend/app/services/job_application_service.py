from typing import Any, Dict, List
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.results import InsertOneResult, UpdateResult
from app.database.mongo import MongoGateway
from app.utils.logger import app_logger


async def list_job_applications(mongo: MongoGateway) -> List[Dict[str, Any]]:
    return await mongo.job_applications.find({}).to_list(length=None)


async def create_job_application(mongo: MongoGateway, application: Dict[str, Any]) -> InsertOneResult:
    """
    지원서 저장 후 해당 공고의 applicationCount를 1 증가시킴.

    두 작업은 트랜잭션으로 묶여 있지 않음. job_id가 ObjectId로 변환되지 않으면
    지원서는 이미 저장된 상태에서 예외가 올라감 (호출 측에서 500 처리).
    job_id가 아예 없으면 새 ObjectId로 조회하게 되어 아무 공고도 증가하지 않음.
    """
    result = await mongo.job_applications.insert_one(application)

    job_id = application.get("job_id")
    try:
        job_object_id = ObjectId(job_id)
    except (InvalidId, TypeError):
        app_logger.warning(
            f"지원서는 저장됨(_id={result.inserted_id}), 그러나 job_id가 유효하지 않아 "
            f"applicationCount 증가 실패: job_id={job_id!r}"
        )
        raise

    update = await mongo.jobs.update_one(
        {"_id": job_object_id},
        {"$inc": {"applicationCount": 1}}
    )
    if update.matched_count == 0:
        app_logger.info(f"applicationCount 증가 대상 공고 없음: job_id={job_id!r}")
    return result


async def update_job_application_status(mongo: MongoGateway, application_id: str, status: Any) -> UpdateResult:
    # 허용 값 검증 없이 덮어씀. 잘못된 id는 InvalidId로 그대로 올라감
    return await mongo.job_applications.update_one(
        {"_id": ObjectId(application_id)},
        {"$set": {"status": status}}
    )
