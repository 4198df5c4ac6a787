from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from decimal import Decimal

# jobs.salary is a 32-bit INTEGER column
MAX_SALARY = 2_147_483_647


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobCreateRequest(CamelModel):
    """Schema for creating a new job"""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1)
    salary: Optional[StrictInt] = Field(None, ge=0, le=MAX_SALARY)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(CamelModel):
    """
    Schema for a partial job update.

    No field is required; an empty body passes here and is rejected by the
    data layer. The id and owning company cannot be changed.
    """
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[StrictInt] = Field(None, ge=0, le=MAX_SALARY)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        """An explicit null would clear a NOT NULL column"""
        if v is None:
            raise ValueError("title cannot be null")
        return v


class JobSearchFilters(CamelModel):
    """Optional filters for listing jobs; hasEquity=false filters nothing"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: bool = False


class CompanySummary(CamelModel):
    """Company as nested inside a job"""
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class JobResponse(CamelModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str


class JobListItem(JobResponse):
    company_name: Optional[str] = None


class JobDetail(CamelModel):
    """Job with its company denormalized in place of the handle"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company: Optional[CompanySummary] = None


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetail


class JobListEnvelope(BaseModel):
    jobs: List[JobListItem]


class JobDeleteResponse(BaseModel):
    deleted: int
