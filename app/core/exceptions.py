"""
맥주 재고 서비스 오류 정의

서비스 계층은 실패를 반환값이 아닌 예외로 알린다.
라우터는 종류별로 HTTP 상태 코드를 매핑한다.
"""


class BeerStockError(Exception):
    """재고 서비스 오류의 최상위 클래스"""


class BeerAlreadyRegisteredError(BeerStockError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Beer with name {name} already registered in the system.")


class BeerNotFoundError(BeerStockError):
    def __init__(self, key, field: str = "name"):
        self.key = key
        self.field = field
        super().__init__(f"Beer with {field} {key} not found in the system.")


class BeerStockExceededError(BeerStockError):
    def __init__(self, beer_id: int, quantity: int, quantity_to_increment: int, max: int):
        self.beer_id = beer_id
        self.quantity = quantity
        self.quantity_to_increment = quantity_to_increment
        self.max = max
        super().__init__(
            f"Beer with id {beer_id} to increment informed exceeds the max stock capacity: "
            f"{quantity} + {quantity_to_increment} > {max}"
        )


class InvalidQuantityError(BeerStockError):
    def __init__(self, quantity_to_increment: int):
        self.quantity_to_increment = quantity_to_increment
        super().__init__(
            f"Quantity to increment must not be negative: {quantity_to_increment}"
        )
