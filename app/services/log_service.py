from datetime import datetime, timezone, timedelta
from typing import Optional
from sqlalchemy.orm import Session
from app.crud import log_crud
from app.schemas.log_schema import LogCreate

# 로그 시각 기준 (KST)
KST = timezone(timedelta(hours=9))


class LogService:
    def __init__(self, db: Session):
        self.db = db  # DB 세션

    # CREATE 로그 생성
    def create_log_entry(
        self,
        beer_name: str,
        quantity: int,
        action: str,
        beer_id: Optional[int] = None,
    ):
        log = LogCreate(
            beer_name=beer_name,
            beer_id=beer_id,
            quantity=quantity,
            action=action,
            timestamp=datetime.now(KST).replace(tzinfo=None),
        )
        return log_crud.create_log(self.db, log)

    # READ 전체 로그 조회
    def list_logs(self, skip: int = 0, limit: int = 100):
        return log_crud.get_logs(self.db, skip, limit)
