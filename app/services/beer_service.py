import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    InvalidQuantityError,
)
from app.core.mapper import BeerMapper
from app.crud.beer_crud import BeerStore
from app.models.beer_model import Beer
from app.schemas.beer_schema import BeerDTO

logger = logging.getLogger(__name__)


class BeerService:
    """
    맥주 재고 관련 비즈니스 로직을 관리하는 서비스 클래스

    - 생성 시 이름 중복 검사
    - 재고 증가 시 최대 수량(max) 초과 검사
    조회 후 저장 사이에 잠금은 없음. 이름 중복은 DB unique 제약이 막고,
    동시 증가 요청은 둘 다 검사를 통과할 수 있음.
    """

    def __init__(self, store: BeerStore, mapper: Optional[BeerMapper] = None):
        self.store = store
        self.mapper = mapper or BeerMapper()

    # CREATE 맥주 등록
    def create_beer(self, beer_dto: BeerDTO) -> BeerDTO:
        self._verify_if_is_already_registered(beer_dto.name)

        beer = self.mapper.to_model(beer_dto)
        beer.id = None  # id는 저장소가 부여
        try:
            saved_beer = self.store.save(beer)
        except IntegrityError as e:
            # 이름 unique 제약 위반일 때만 중복 등록으로 변환
            if self.store.find_by_name(beer_dto.name) is None:
                raise
            logger.warning("Beer %s registered concurrently", beer_dto.name)
            raise BeerAlreadyRegisteredError(beer_dto.name) from e

        logger.info("Beer %s created with id %s", saved_beer.name, saved_beer.id)
        return self.mapper.to_dto(saved_beer)

    # READ 이름으로 조회
    def find_by_name(self, name: str) -> BeerDTO:
        found_beer = self.store.find_by_name(name)
        if found_beer is None:
            logger.warning("Beer %s not found", name)
            raise BeerNotFoundError(name, field="name")
        return self.mapper.to_dto(found_beer)

    # READ 전체 조회
    def list_all(self) -> List[BeerDTO]:
        return [self.mapper.to_dto(beer) for beer in self.store.find_all()]

    # DELETE 맥주 삭제
    def delete_by_id(self, beer_id: int) -> None:
        self._verify_if_exists(beer_id)
        self.store.delete_by_id(beer_id)
        logger.info("Beer %s deleted", beer_id)

    # UPDATE 재고 증가
    def increment(self, beer_id: int, quantity_to_increment: int) -> BeerDTO:
        if quantity_to_increment < 0:
            logger.warning("Rejected negative increment %s for beer %s", quantity_to_increment, beer_id)
            raise InvalidQuantityError(quantity_to_increment)

        beer_to_increment = self._verify_if_exists(beer_id)
        quantity_after_increment = beer_to_increment.quantity + quantity_to_increment
        if quantity_after_increment > beer_to_increment.max:
            logger.warning(
                "Increment of %s on beer %s exceeds max %s (current %s)",
                quantity_to_increment,
                beer_id,
                beer_to_increment.max,
                beer_to_increment.quantity,
            )
            raise BeerStockExceededError(
                beer_id,
                beer_to_increment.quantity,
                quantity_to_increment,
                beer_to_increment.max,
            )

        beer_to_increment.quantity = quantity_after_increment
        incremented_beer = self.store.save(beer_to_increment)
        logger.info("Beer %s stock incremented to %s", beer_id, incremented_beer.quantity)
        return self.mapper.to_dto(incremented_beer)

    def _verify_if_is_already_registered(self, name: str) -> None:
        if self.store.find_by_name(name) is not None:
            logger.warning("Beer %s already registered", name)
            raise BeerAlreadyRegisteredError(name)

    def _verify_if_exists(self, beer_id: int) -> Beer:
        beer = self.store.find_by_id(beer_id)
        if beer is None:
            logger.warning("Beer %s not found", beer_id)
            raise BeerNotFoundError(beer_id, field="id")
        return beer
