from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings

# DB 접속 URL
DB_URL = settings.database_url

# SQLite는 요청 스레드가 달라질 수 있으므로 스레드 검사 해제
connect_args = {"check_same_thread": False} if DB_URL.startswith("sqlite") else {}

# SQLAlchemy 엔진
engine = create_engine(DB_URL, pool_pre_ping=True, connect_args=connect_args)

# DB 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# ORM 베이스 클래스
Base = declarative_base()


# DB 세션 의존성
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
