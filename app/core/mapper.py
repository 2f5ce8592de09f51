from app.models.beer_model import Beer
from app.schemas.beer_schema import BeerDTO


class BeerMapper:
    """BeerDTO <-> Beer 레코드 변환 (상태 없음)"""

    def to_model(self, beer_dto: BeerDTO) -> Beer:
        return Beer(
            id=beer_dto.id,
            name=beer_dto.name,
            brand=beer_dto.brand,
            max=beer_dto.max,
            quantity=beer_dto.quantity,
        )

    def to_dto(self, beer: Beer) -> BeerDTO:
        return BeerDTO(
            id=beer.id,
            name=beer.name,
            brand=beer.brand,
            max=beer.max,
            quantity=beer.quantity,
        )
