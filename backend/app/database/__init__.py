from fastapi import Request
from app.database.mongo import MongoGateway

# lifespan에서 app.state.mongo에 올려둔 게이트웨이를 제공하는 의존성 함수
def get_mongo(request: Request) -> MongoGateway:
    return request.app.state.mongo
