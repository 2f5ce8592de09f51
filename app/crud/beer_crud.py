# app/crud/beer_crud.py
from typing import List, Optional, Protocol

from sqlalchemy.orm import Session
from app.models.beer_model import Beer


class BeerStore(Protocol):
    """BeerService가 필요로 하는 저장소 인터페이스"""

    def find_by_name(self, name: str) -> Optional[Beer]: ...

    def find_by_id(self, beer_id: int) -> Optional[Beer]: ...

    def find_all(self) -> List[Beer]: ...

    def save(self, beer: Beer) -> Beer: ...

    def delete_by_id(self, beer_id: int) -> None: ...


class BeerRepository:
    def __init__(self, db: Session):
        self.db = db

    # READ 이름으로 조회
    def find_by_name(self, name: str) -> Optional[Beer]:
        return self.db.query(Beer).filter(Beer.name == name).first()

    # READ 단일 조회 (ID 기준)
    def find_by_id(self, beer_id: int) -> Optional[Beer]:
        return self.db.query(Beer).filter(Beer.id == beer_id).first()

    # READ-ALL 전체 조회
    def find_all(self) -> List[Beer]:
        return self.db.query(Beer).order_by(Beer.id).all()

    # CREATE / UPDATE
    def save(self, beer: Beer) -> Beer:
        """
        신규 레코드는 id가 부여되고, 기존 레코드는 변경 내용이 반영됨
        커밋 실패 시 롤백 후 예외를 그대로 전달함
        """
        try:
            self.db.add(beer)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(beer)
        return beer

    # DELETE
    def delete_by_id(self, beer_id: int) -> None:
        try:
            self.db.query(Beer).filter(Beer.id == beer_id).delete()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
