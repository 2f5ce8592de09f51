from pydantic import BaseModel
from datetime import datetime
from typing import Optional


# 기본 로그 데이터 스키마 (공통 필드 정의)
class LogBase(BaseModel):
    beer_name: str                   # 맥주 이름
    beer_id: Optional[int] = None    # 맥주 ID (옵션)
    quantity: int                    # 작업 후 수량
    action: str                      # 작업 종류 (create, increment, delete)
    timestamp: datetime              # 이벤트 발생 시각


# 로그 생성 요청 시 사용 (입력용)
class LogCreate(LogBase):
    pass


# 로그 조회 응답 시 사용 (출력용)
class LogResponse(LogBase):
    id: int

    class Config:
        from_attributes = True
