from fastapi import APIRouter, Body, Depends, Query, status
from typing import Any, Dict, List, Optional
from app.database import get_mongo
from app.database.mongo import MongoGateway
from app.schemas.mongo_result import InsertResultResponse
from app.services import job_service
from app.utils.bson_utils import serialize_document
from app.utils.exceptions import InternalServerException, NotFoundException
from app.utils.logger import app_logger

router = APIRouter(prefix="/jobs", tags=["jobs"])

@router.get(
    "",
    response_model=List[Dict[str, Any]],
    summary="채용공고 목록 조회",
    description="""
    전체 채용공고를 반환합니다.\n
    - `email` 쿼리 파라미터가 있으면 `hr_email`이 일치하는 공고만 반환합니다.
    """
)
async def read_jobs(
    email: Optional[str] = Query(None, description="담당자(hr_email)로 필터링"),
    mongo: MongoGateway = Depends(get_mongo)
):
    try:
        jobs = await job_service.list_jobs(mongo, email)
    except Exception as e:
        app_logger.error(f"Error fetching jobs: {str(e)}")
        raise InternalServerException("Failed to fetch jobs")
    app_logger.info(f"채용공고 조회 완료: {len(jobs)}건, email={email}")
    return serialize_document(jobs)

@router.get(
    "/{job_id}",
    response_model=Dict[str, Any],
    summary="채용공고 단건 조회",
    description="ObjectId 형식이 아니거나 존재하지 않는 공고면 404를 반환합니다."
)
async def read_job(job_id: str, mongo: MongoGateway = Depends(get_mongo)):
    try:
        job = await job_service.get_job(mongo, job_id)
    except Exception as e:
        app_logger.error(f"Error fetching job: {str(e)}")
        raise InternalServerException("Failed to fetch job")
    if job is None:
        raise NotFoundException("Job", "Job not found")
    return serialize_document(job)

@router.post(
    "",
    response_model=InsertResultResponse,
    status_code=status.HTTP_201_CREATED,
    summary="채용공고 등록",
    description="요청 본문(JSON 객체)을 검증 없이 그대로 저장합니다."
)
async def create_job(
    job: Dict[str, Any] = Body(...),
    mongo: MongoGateway = Depends(get_mongo)
):
    try:
        result = await job_service.create_job(mongo, job)
    except Exception as e:
        app_logger.error(f"Error creating job: {str(e)}")
        raise InternalServerException("Failed to create job")
    app_logger.info(f"채용공고 등록 완료: _id={result.inserted_id}")
    return InsertResultResponse.from_result(result)
