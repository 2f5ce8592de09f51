from sqlalchemy import Column, Integer, String, BigInteger, DateTime
from app.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함

class Log(Base):

    __tablename__ = "log"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)

    # 맥주 관련 정보
    beer_name = Column(String(200), nullable=False)  # 맥주 이름
    beer_id = Column(BigInteger, nullable=True)      # 맥주 고유 ID (옵션)
    quantity = Column(Integer, nullable=False)       # 작업 후 수량

    # 작업 관련 정보
    action = Column(String(50), nullable=False)    # create / increment / delete

    # 이벤트 발생 시간
    timestamp = Column(DateTime, nullable=False)  # 로그 발생 시각
