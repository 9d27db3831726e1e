from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class SearchFilters:
    min_grant_amount: Optional[float] = None  # EUR; None/0 = not set
    eligibility: List[str] = field(default_factory=list)
    custom_eligibility: str = ""
    subsidy_types: List[str] = field(default_factory=list)  # "Grant" | "Loan" | "Tax Credit"


@dataclass
class AdvisorInput:
    country: str
    client_profile: str
    filters: SearchFilters = field(default_factory=SearchFilters)


class Subsidy(BaseModel):
    """One subsidy as described by the model."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str
    eligibility: List[str]
    potential_benefit: str = Field(alias="potentialBenefit")


class SubsidyResponse(BaseModel):
    """The JSON object the model is asked to return."""
    model_config = ConfigDict(frozen=True)

    subsidies: List[Subsidy]
    summary: str


@dataclass(frozen=True)
class Source:
    uri: str
    title: str


@dataclass
class SearchResult:
    response: SubsidyResponse
    sources: List[Source] = field(default_factory=list)
