from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from .keyword_catalog import DEFAULT_LOCATION_ID, DEFAULT_PROPERTY_TYPE_ID


class ParsedPropertyData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    code: Optional[str] = None                # "MS208"
    name: Optional[str] = None
    address: Optional[str] = None

    price_weekday: Optional[int] = None       # VND
    price_weekend: Optional[int] = None
    standard_guests: Optional[int] = None
    max_guests: Optional[int] = None

    bedroom_count: Optional[int] = None
    bathroom_count: Optional[int] = None
    bed_count: Optional[int] = None
    bed_config: Optional[str] = None          # "2 giường đôi, 1 giường đơn"

    distance_to_sea: Optional[str] = None     # "700m" | "2km"
    pool_area: Optional[str] = None           # "45m²"
    facebook_link: Optional[str] = None

    location_id: int = DEFAULT_LOCATION_ID
    property_type_id: int = DEFAULT_PROPERTY_TYPE_ID
    amenity_ids: tuple[int, ...] = ()

    price_note: str = ""
    description: Optional[str] = None


class ParseRequest(BaseModel):
    text: str = Field(description="Nội dung bài đăng dán từ Facebook/Zalo")


class ParseResponse(BaseModel):
    data: ParsedPropertyData
    missing_fields: list[str] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    missing_fields: list[str] = Field(default_factory=list)


class CatalogResponse(BaseModel):
    locations: dict[int, str]
    property_types: dict[int, str]
    amenities: dict[int, str]
    default_location_id: int
    default_property_type_id: int
