"""Schemas for the dining commons menu items resource."""

from typing import Optional

from pydantic import Field

from campus_api.schemas.common import CamelModel, SurrogateId


class MenuItemCreate(CamelModel):
    dining_commons_code: str = Field(max_length=64, description="Dining commons code, e.g. 'ortega'")
    name: str = Field(max_length=255, description="Name of the dish")
    station: str = Field(max_length=255, description="Station the dish is served at")


class MenuItemUpdate(MenuItemCreate):
    id: Optional[SurrogateId] = None


class MenuItemResponse(MenuItemCreate):
    id: SurrogateId
