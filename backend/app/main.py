from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from app.config import settings
from app.database.mongo import MongoGateway
from app.routers import job, job_application
from app.utils.exceptions import AppException, app_exception_handler
from app.utils.logger import app_logger, mongo_logger

# 앱 시작 시 MongoDB 연결, 종료 시(SIGINT/SIGTERM 포함) 연결 정리
@asynccontextmanager
async def lifespan(app: FastAPI):
    mongo = MongoGateway(settings)
    try:
        await mongo.connect()
    except Exception as e:
        # 저장소 없이는 어떤 라우트도 동작할 수 없으므로 기동 중단
        mongo_logger.error(f"Error connecting to MongoDB: {str(e)}")
        raise
    app.state.mongo = mongo
    app_logger.info(f"Server running at http://localhost:{settings.PORT}")
    try:
        yield
    finally:
        await mongo.shutdown()

# FastAPI 앱 생성
app = FastAPI(
    title="Job Portal API",
    lifespan=lifespan
)

@app.get("/")
async def root():
    """API 루트 경로"""
    return {"message": "Welcome to the Job Portal API"}

# CORS 설정 (허용 origin 목록 + 쿠키 포함 요청 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def content_security_policy(request: Request, call_next):
    response = await call_next(request)
    response.headers["Content-Security-Policy"] = settings.CONTENT_SECURITY_POLICY
    return response

app.add_exception_handler(AppException, app_exception_handler)

# 라우터 등록
app.include_router(job.router)
app.include_router(job_application.router)


def run():
    """`job-portal` 콘솔 엔트리포인트"""
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )

if __name__ == "__main__":
    run()
