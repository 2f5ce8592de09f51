from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    InvalidQuantityError,
)
from app.crud.beer_crud import BeerRepository
from app.schemas.beer_schema import BeerCreateDTO, BeerDTO, QuantityDTO
from app.services.beer_service import BeerService
from app.services.log_service import LogService

# 맥주 재고 관련 API 라우터
router = APIRouter(prefix="/api/v1/beers", tags=["Beers"])


# 저장소 의존성
def get_beer_repository(db: Session = Depends(get_db)) -> BeerRepository:
    return BeerRepository(db)


# 서비스 의존성
def get_beer_service(repository: BeerRepository = Depends(get_beer_repository)) -> BeerService:
    return BeerService(repository)


# 맥주 등록
@router.post("/", response_model=BeerDTO, status_code=status.HTTP_201_CREATED)
def create_beer(
    beer: BeerCreateDTO,
    service: BeerService = Depends(get_beer_service),
    db: Session = Depends(get_db),
):
    try:
        created = service.create_beer(beer)
    except BeerAlreadyRegisteredError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # 등록 로그 기록
    LogService(db).create_log_entry(created.name, created.quantity, "create", beer_id=created.id)
    return created


# 전체 맥주 조회
@router.get("/", response_model=List[BeerDTO])
def list_beers(service: BeerService = Depends(get_beer_service)):
    return service.list_all()


# 이름으로 조회
@router.get("/{name}", response_model=BeerDTO)
def find_by_name(name: str, service: BeerService = Depends(get_beer_service)):
    try:
        return service.find_by_name(name)
    except BeerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# 맥주 삭제
@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_by_id(
    beer_id: int,
    service: BeerService = Depends(get_beer_service),
    repository: BeerRepository = Depends(get_beer_repository),
    db: Session = Depends(get_db),
):
    # 삭제 전 로그용 정보 확보
    beer = repository.find_by_id(beer_id)
    beer_name = beer.name if beer else "-"
    last_quantity = beer.quantity if beer else 0

    try:
        service.delete_by_id(beer_id)
    except BeerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    # 삭제 로그 기록
    LogService(db).create_log_entry(beer_name, last_quantity, "delete", beer_id=beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# 재고 증가
@router.patch("/{beer_id}/increment", response_model=BeerDTO)
def increment(
    beer_id: int,
    quantity_dto: QuantityDTO,
    service: BeerService = Depends(get_beer_service),
    db: Session = Depends(get_db),
):
    try:
        incremented = service.increment(beer_id, quantity_dto.quantity)
    except BeerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BeerStockExceededError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InvalidQuantityError as e:
        raise HTTPException(status_code=422, detail=str(e))

    # 재고 증가 로그 기록
    LogService(db).create_log_entry(
        incremented.name, incremented.quantity, "increment", beer_id=incremented.id
    )
    return incremented
