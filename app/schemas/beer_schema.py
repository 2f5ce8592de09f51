from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional


# 맥주 입출력 스키마 (저장된 상태 그대로 표현)
class BeerDTO(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=200)
    brand: str = Field(min_length=1, max_length=200)
    max: int = Field(ge=0)
    quantity: int = Field(ge=0)

    class Config:
        from_attributes = True

    @field_validator("name", "brand", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v


# 맥주 등록 요청 스키마
class BeerCreateDTO(BeerDTO):

    @model_validator(mode="after")
    def _quantity_within_max(self):
        # 생성 시점부터 수량 상한 보장
        if self.quantity > self.max:
            raise ValueError("quantity must not exceed max")
        return self


# 재고 증가 요청 스키마
class QuantityDTO(BaseModel):
    quantity: int = Field(ge=0)
