# packages/schemas/schemas/models.py
from pydantic import BaseModel, Field, confloat, constr
from typing import Literal

# ----- Common -----
Decision = Literal["approved", "rejected"]
Sex = Literal["M", "F"]
ResponseSource = Literal["strict", "best_effort"]

DEFAULT_JUSTIFICATION = "No justification provided by server."


class PolicyResponse(BaseModel):
    """Decision record rendered by the UI, whatever shape the server replied with."""
    name: str = ""
    age: str = ""                      # kept as text; upstream is not always numeric
    sex: Sex = "M"
    decision: Decision
    amount: confloat(allow_inf_nan=False)
    justification: constr(min_length=1)


class ParsedPolicyResponse(BaseModel):
    record: PolicyResponse
    # "strict" = every required field came from the payload,
    # "best_effort" = scraped, possibly with defaults filled in
    source: ResponseSource = Field(default="strict")
