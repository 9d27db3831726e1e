from typing import List

from tools.formatting import fmt_eur
from tools.models import AdvisorInput, SearchFilters

FILTERS_INTRO = "Please apply the following filters to your search:"

RESPONSE_FORMAT = """{
  "subsidies": [
    {
      "name": "Subsidy Name",
      "description": "Brief description of the subsidy.",
      "eligibility": ["Criteria 1", "Criteria 2", "Etc."],
      "potentialBenefit": "Description of the financial benefit."
    }
  ],
  "summary": "A summary of potential eligibility and next steps."
}"""


def build_filter_clauses(filters: SearchFilters) -> List[str]:
    """One clause per active filter category, in a fixed order."""
    clauses = []
    if filters.min_grant_amount:
        clauses.append(f"- The subsidy must provide a minimum grant amount of {fmt_eur(filters.min_grant_amount)}.")

    characteristics = [e for e in filters.eligibility if e]
    if filters.custom_eligibility.strip():
        characteristics.append(filters.custom_eligibility.strip())
    if characteristics:
        clauses.append(f"- The client has the following characteristics: {', '.join(characteristics)}.")

    if filters.subsidy_types:
        clauses.append(f"- Only consider subsidies of the following types: {', '.join(filters.subsidy_types)}.")
    return clauses


def build_subsidy_prompt(inp: AdvisorInput) -> str:
    """Compose the search-grounded request for subsidies matching the advisor's input."""
    clauses = build_filter_clauses(inp.filters)
    filter_block = ""
    if clauses:
        filter_block = FILTERS_INTRO + "\n" + "\n".join(clauses) + "\n\n"

    return (
        f"You are an expert advisor on EU housing subsidies.\n"
        f"A user from {inp.country} is asking for information on mortgage and housing subsidies.\n"
        f"Their client profile is: \"{inp.client_profile}\"\n\n"
        f"{filter_block}"
        f"Please find relevant national and regional government-backed subsidies for purchasing a primary "
        f"residence based on this profile and the filters.\n"
        f"For each subsidy you find, present it in the following JSON format within a `subsidies` array.\n"
        f"Also provide an overall `summary` of the findings. Where a statement comes from a source, "
        f"cite it inline with a bracketed number like [1].\n\n"
        f"The final output MUST be a single JSON object. Do not include markdown backticks or any other "
        f"text outside of the JSON object.\n\n"
        f"Example format:\n{RESPONSE_FORMAT}\n"
    )


def build_profile_prompt(country: str) -> str:
    return (
        f"Generate a short, single-sentence, realistic client profile for a mortgage applicant in {country}.\n"
        f"Focus on common scenarios.\n"
        f"For example: \"A young couple, first-time home buyers, looking for a sustainable home.\"\n"
        f"or \"A family with two children looking to upgrade to a larger, energy-efficient house.\"\n"
        f"or \"A single person under 30 looking to buy their first apartment in a city.\"\n"
        f"Do not add any preamble or explanation. Just return the sentence."
    )
