from pydantic import BaseModel, Field
from typing import Any, Optional

class JobApplicationStatusUpdate(BaseModel):
    """지원 상태 변경 요청. 값 검증 없음 (예: pending, accepted, rejected)"""
    status: Optional[Any] = Field(None, description="새 지원 상태")
