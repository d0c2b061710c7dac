"""Fixed minimum-area rule table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Callable, Dict, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import MissionContext


class PerCrew(BaseModel):
    """``rate`` square metres per crew member."""

    model_config = ConfigDict(frozen=True)

    form: Literal["per_crew"] = "per_crew"
    rate: float = Field(..., ge=0)


class PerCrewPer30Days(BaseModel):
    """``rate`` square metres per crew member per 30 mission days."""

    model_config = ConfigDict(frozen=True)

    form: Literal["per_crew_per_30_days"] = "per_crew_per_30_days"
    rate: float = Field(..., ge=0)


class FixedMinimum(BaseModel):
    model_config = ConfigDict(frozen=True)

    form: Literal["fixed_minimum"] = "fixed_minimum"
    value: float = Field(..., ge=0)


RuleSpec = Annotated[
    Union[PerCrew, PerCrewPer30Days, FixedMinimum],
    Field(discriminator="form"),
]

# Conservative figures for early design iterations. Order is report order.
RULES: Mapping[str, RuleSpec] = MappingProxyType(
    {
        "Sleep": PerCrew(rate=4),
        "Recreation": PerCrew(rate=2),
        "Exercise": PerCrew(rate=3),
        "Hygiene": FixedMinimum(value=3),
        "ECLSS": FixedMinimum(value=4),
        "Stowage": PerCrewPer30Days(rate=0.5),
    }
)


_REQUIRED: Dict[str, Callable[..., float]] = {
    "per_crew": lambda rule, mission: rule.rate * mission.crew_size,
    "per_crew_per_30_days": lambda rule, mission: (
        rule.rate * mission.crew_size * (max(1, mission.mission_days) / 30)
    ),
    "fixed_minimum": lambda rule, mission: rule.value,
}


def required_area(rule: RuleSpec, mission: MissionContext) -> float:
    """Minimum floor area a rule demands for the given mission."""

    return float(_REQUIRED[rule.form](rule, mission))


def rule_table() -> Dict[str, Dict[str, object]]:
    """Plain-dict view of the rule table, in report order."""

    return {name: rule.model_dump() for name, rule in RULES.items()}
