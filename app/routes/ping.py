from fastapi import APIRouter

from app.models.ping_models import PingResponse

router = APIRouter()


@router.get("/ping", response_model=PingResponse)
async def ping():
    """
    서버 상태 확인용 엔드포인트
    """
    return {"message": "pong"}
