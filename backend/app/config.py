import os
from typing import List, Optional
from urllib.parse import quote_plus
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

from app.utils.exceptions import MissingCredentialsError

load_dotenv()

class Settings(BaseSettings):
    # 서버 설정
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # MongoDB 접속 정보 (Atlas 클러스터)
    DB_USER: Optional[str] = os.getenv("DB_USER")
    DB_PASS: Optional[str] = os.getenv("DB_PASS")
    DB_CLUSTER: str = os.getenv("DB_CLUSTER", "cluster0.olkic.mongodb.net")
    # 로컬 개발용: 전체 URI를 직접 지정하면 위 접속 정보는 무시됨
    MONGO_URI: Optional[str] = os.getenv("MONGO_URI")

    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "Job-Portal")
    JOBS_COLLECTION: str = os.getenv("JOBS_COLLECTION", "Jobs")
    APPLICATIONS_COLLECTION: str = os.getenv("APPLICATIONS_COLLECTION", "job_applications")

    # CORS 설정 (쉼표로 구분된 허용 origin 목록)
    CORS_ORIGINS: str = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:5173,https://job-portal2-efa9b.web.app,job-portal2-efa9b.firebaseapp.com"
    )

    # 워커 스크립트(blob:)만 추가로 허용
    CONTENT_SECURITY_POLICY: str = os.getenv(
        "CONTENT_SECURITY_POLICY",
        "default-src 'self'; worker-src 'self' blob:;"
    )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def mongo_uri(self) -> str:
        """MongoDB 접속 URI. 자격 증명이 없으면 MissingCredentialsError"""
        if self.MONGO_URI:
            return self.MONGO_URI
        if not self.DB_USER or not self.DB_PASS:
            raise MissingCredentialsError()
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
            f"@{self.DB_CLUSTER}/?retryWrites=true&w=majority"
        )

settings = Settings()
