import pytest
from pydantic import ValidationError

from app.core.mapper import BeerMapper
from app.models.beer_model import Beer
from app.schemas.beer_schema import BeerCreateDTO, BeerDTO, QuantityDTO


def test_names_are_stripped(make_beer_dto):
    dto = make_beer_dto(name="  Brahma ", brand=" Ambev")

    assert (dto.name, dto.brand) == ("Brahma", "Ambev")


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "   "},
        {"brand": ""},
        {"name": "x" * 201},
        {"max": -1},
        {"quantity": -1},
        {"quantity": 51},
    ],
)
def test_invalid_beer_is_rejected_on_create(make_beer_dto, overrides):
    with pytest.raises(ValidationError):
        make_beer_dto(BeerCreateDTO, **overrides)


def test_beer_dto_represents_stored_quantity_above_max(make_beer_dto):
    assert make_beer_dto(quantity=60).quantity == 60


def test_quantity_dto_rejects_negative():
    assert QuantityDTO(quantity=0).quantity == 0
    with pytest.raises(ValidationError):
        QuantityDTO(quantity=-3)


def test_mapper_round_trip_keeps_every_field(make_beer_dto):
    mapper = BeerMapper()
    dto = make_beer_dto()

    beer = mapper.to_model(dto)

    assert (beer.id, beer.name, beer.brand, beer.max, beer.quantity) == (1, "Brahma", "Ambev", 50, 10)
    assert mapper.to_dto(beer) == dto
    assert isinstance(mapper.to_dto(beer), BeerDTO)


def test_mapper_accepts_any_stored_state():
    beer = Beer(id=7, name="Brahma", brand="Ambev", max=50, quantity=60)

    assert BeerMapper().to_dto(beer).quantity == 60
