from sqlalchemy.orm import Session
from app.models.log_model import Log
from app.schemas.log_schema import LogCreate


# READ-ALL 전체 로그 조회 (최신순)
def get_logs(db: Session, skip: int = 0, limit: int = 100):
    return db.query(Log).order_by(Log.id.desc()).offset(skip).limit(limit).all()


# CREATE 새로운 로그 데이터 추가
def create_log(db: Session, log_data: LogCreate):
    new_log = Log(**log_data.model_dump())
    db.add(new_log)
    db.commit()
    db.refresh(new_log)
    return new_log
