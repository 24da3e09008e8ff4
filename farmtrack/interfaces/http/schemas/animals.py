from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AnimalCreate(BaseModel):
    ear_tag: str = Field(min_length=1, max_length=64)
    species: str
    breed: str = Field(min_length=1, max_length=128)
    gender: str
    birth_date: date
    mother_ear_tag: str | None = None
    notes: str | None = None
    profile_image_url: str | None = None


class AnimalUpdate(BaseModel):
    version: int
    ear_tag: str | None = Field(default=None, min_length=1, max_length=64)
    species: str | None = None
    breed: str | None = None
    gender: str | None = None
    birth_date: date | None = None
    mother_ear_tag: str | None = None
    notes: str | None = None
    profile_image_url: str | None = None


class AnimalCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    key: str
    label: str
    color: str


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    ear_tag: str
    species: str
    breed: str
    gender: str
    birth_date: date
    mother_ear_tag: str | None = None
    notes: str | None = None
    profile_image_url: str | None = None
    status: str
    sold_to: str | None = None
    sold_date: date | None = None
    sold_price: Decimal | None = None
    death_date: date | None = None
    death_reason: str | None = None
    version: int
    created_at: datetime
    updated_at: datetime
    # Derived for the animal card
    age: str | None = None
    category: AnimalCategoryResponse | None = None


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    total: int


class AnimalSaleRequest(BaseModel):
    sold_to: str = Field(min_length=1)
    sold_date: date
    sold_price: Decimal = Field(ge=0)
    record_income: bool = False


class AnimalDeathRequest(BaseModel):
    death_date: date
    death_reason: str | None = None


class BatchSaleRequest(AnimalSaleRequest):
    animal_ids: list[UUID] = Field(min_length=1)
    sold_price: Decimal = Field(ge=0, description="Total for the whole batch")


class BatchDeathRequest(AnimalDeathRequest):
    animal_ids: list[UUID] = Field(min_length=1)


class BatchResultResponse(BaseModel):
    updated: int
    items: list[AnimalResponse]
