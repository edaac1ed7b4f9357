from fastapi import APIRouter, Body, Depends, status
from typing import Any, Dict, List
from app.database import get_mongo
from app.database.mongo import MongoGateway
from app.schemas.job_application import JobApplicationStatusUpdate
from app.schemas.mongo_result import InsertResultResponse, UpdateResultResponse
from app.services import job_application_service
from app.utils.bson_utils import serialize_document
from app.utils.exceptions import InternalServerException
from app.utils.logger import app_logger

router = APIRouter(prefix="/job-applications", tags=["job_applications"])

@router.post(
    "",
    response_model=InsertResultResponse,
    status_code=status.HTTP_201_CREATED,
    summary="지원서 제출",
    description="""
    지원서를 저장하고 `job_id`에 해당하는 공고의 `applicationCount`를 1 증가시킵니다.\n
    - 해당 공고가 없어도 201을 반환합니다.
    - `job_id`가 ObjectId 형식이 아니면 500을 반환합니다. 이 경우에도 지원서는 이미 저장되어 있습니다.
    """
)
async def create_job_application(
    application: Dict[str, Any] = Body(...),
    mongo: MongoGateway = Depends(get_mongo)
):
    try:
        result = await job_application_service.create_job_application(mongo, application)
    except Exception as e:
        app_logger.error(f"Error creating job application: {str(e)}")
        raise InternalServerException("Failed to create job application")
    app_logger.info(f"지원서 등록 완료: _id={result.inserted_id}, job_id={application.get('job_id')}")
    return InsertResultResponse.from_result(result)

@router.get(
    "",
    response_model=List[Dict[str, Any]],
    summary="전체 지원서 조회"
)
async def read_job_applications(mongo: MongoGateway = Depends(get_mongo)):
    try:
        applications = await job_application_service.list_job_applications(mongo)
    except Exception as e:
        app_logger.error(f"Error fetching job applications: {str(e)}")
        raise InternalServerException("Failed to fetch job applications")
    return serialize_document(applications)

@router.patch(
    "/{application_id}",
    response_model=UpdateResultResponse,
    summary="지원 상태 변경",
    description="일치하는 지원서가 없어도 200과 함께 matchedCount=0을 반환합니다."
)
async def update_job_application_status(
    application_id: str,
    payload: JobApplicationStatusUpdate,
    mongo: MongoGateway = Depends(get_mongo)
):
    try:
        result = await job_application_service.update_job_application_status(
            mongo, application_id, payload.status
        )
    except Exception as e:
        app_logger.error(f"Error updating application status: {str(e)}")
        raise InternalServerException("Failed to update job application status")
    return UpdateResultResponse.from_result(result)
