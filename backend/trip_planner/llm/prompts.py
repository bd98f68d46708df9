from datetime import date
from typing import Sequence

PLANNER_SYSTEM_PROMPT = (
    "You are a professional travel planner. You answer with a single JSON "
    "object and no prose."
)

_ITINERARY_TEMPLATE = """\
Create a travel itinerary for {destination}.
Dates: {start} to {end}.
Budget: INR {budget}.
Theme: {theme}.
Interests: {interests}.
Include hidden gems, local cuisine, and authentic experiences.
For each day, provide:
  - activities (array of strings),
  - nearest hospital,
  - nearest pharmacy,
  - a travel tip.
Keep JSON format strictly:
{{
  "days": [
    {{ "day": 1, "activities": [], "hospital": "", "pharmacy": "", "tip": "" }}
  ]
}}
"""


def _format_budget(budget: float) -> str:
    return str(int(budget)) if float(budget).is_integer() else f"{budget:.2f}"


def build_itinerary_prompt(
    destination: str,
    start: date,
    end: date,
    budget: float,
    theme: str,
    interests: Sequence[str] = (),
) -> str:
    return _ITINERARY_TEMPLATE.format(
        destination=destination,
        start=start.isoformat(),
        end=end.isoformat(),
        budget=_format_budget(budget),
        theme=theme,
        interests=", ".join(interests) if interests else "none specified",
    )
