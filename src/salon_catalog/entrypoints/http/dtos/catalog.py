from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Activeness = Literal["all", "active", "inactive"]
PriceBucket = Literal["all", "low", "medium", "high"]
SortKey = Literal["name", "price", "duration"]


class ServiceResponseDTO(BaseModel):
    identity: str | int
    name: str
    category: str
    price: float
    price_label: str
    duration_minutes: int | None
    duration_label: str
    description: str
    is_active: bool
    status_label: str


class CatalogStatsDTO(BaseModel):
    total: int
    active_count: int
    average_price: float
    distinct_category_count: int


class FilterCriteriaDTO(BaseModel):
    search_text: str
    category: str
    activeness: Activeness
    price_bucket: PriceBucket


class FilterCriteriaUpdateDTO(BaseModel):
    """Partial criteria update. Omitted fields keep their current value."""

    search_text: str | None = Field(
        default=None,
        description="Case-insensitive substring matched against name, description and category",
        examples=["haircut"],
    )
    category: str | None = Field(
        default=None,
        description='Exact category, or "all"',
        examples=["Hair"],
    )
    activeness: Activeness | None = Field(
        default=None,
        description="Filter by active status",
        examples=["active"],
    )
    price_bucket: PriceBucket | None = Field(
        default=None,
        description="low (< 500), medium (500 to < 1500), high (>= 1500)",
        examples=["medium"],
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "search_text": "cut",
                "category": "Hair",
                "activeness": "active",
                "price_bucket": "low",
            }
        },
    )


class CatalogQueryDTO(BaseModel):
    """Query parameters for browsing the filtered catalog."""

    offset: int = Field(
        default=0,
        description="Number of matching services to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=50,
        description="Maximum number of services to return",
        examples=[50],
        ge=1,
        le=200,
    )
    sort_by: SortKey | None = Field(
        default=None,
        description="Display ordering; source order when omitted",
        examples=["price"],
    )
    descending: bool = Field(
        default=False,
        description="Reverse the ordering given by sort_by",
    )


class CatalogResponseDTO(BaseModel):
    services: list[ServiceResponseDTO]
    total_matching: int
    full_count: int
    offset: int
    limit: int
    stats: CatalogStatsDTO
    criteria: FilterCriteriaDTO
    filters_active: bool
    categories: list[str]
    loading: bool
    error_message: str | None


class CategoriesResponseDTO(BaseModel):
    categories: list[str]
