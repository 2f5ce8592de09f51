# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging_config import setup_logging

from app.routers.beer_router import router as beer_router
from app.routers.log_router import router as log_router

from app.core.database import Base, engine
from app import models  # noqa: F401  테이블 메타데이터 등록

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Beer Stock API", debug=settings.DEBUG)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(beer_router)
app.include_router(log_router)


# --------------------------------
# 상태 확인
# --------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


# --------------------------------
# 서버 이벤트
# --------------------------------
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("DB 테이블 자동 생성 완료")
    logger.info("서버 시작")


@app.on_event("shutdown")
def on_shutdown():
    logger.info("서버 종료")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.SERVER_PORT, reload=settings.DEBUG)
