from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.schemas.log_schema import LogResponse
from app.services.log_service import LogService

# 재고 이력 로그 API 라우터
router = APIRouter(prefix="/logs", tags=["Logs"])


# 전체 로그 조회 (최신순)
@router.get("/", response_model=List[LogResponse])
def read_logs(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return LogService(db).list_logs(skip, limit)
