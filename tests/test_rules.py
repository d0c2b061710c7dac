import pytest
from pydantic import ValidationError

from habitat_designer.models import MissionContext
from habitat_designer.rules import (
    RULES,
    FixedMinimum,
    PerCrew,
    PerCrewPer30Days,
    required_area,
    rule_table,
)


def test_table_order_and_forms():
    assert list(RULES) == ["Sleep", "Recreation", "Exercise", "Hygiene", "ECLSS", "Stowage"]
    assert RULES["Sleep"] == PerCrew(rate=4)
    assert RULES["ECLSS"] == FixedMinimum(value=4)
    assert RULES["Stowage"] == PerCrewPer30Days(rate=0.5)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        RULES["Sleep"] = FixedMinimum(value=1)  # type: ignore[index]
    with pytest.raises(ValidationError):
        RULES["Sleep"].rate = 1  # type: ignore[misc]


def test_required_area_per_form():
    mission = MissionContext(crew_size=6, mission_days=60)
    assert required_area(PerCrew(rate=3), mission) == 18
    assert required_area(PerCrewPer30Days(rate=0.5), mission) == pytest.approx(6.0)
    assert required_area(FixedMinimum(value=3), mission) == 3


def test_rule_table_dump():
    table = rule_table()
    assert table["Hygiene"] == {"form": "fixed_minimum", "value": 3.0}
    assert table["Sleep"] == {"form": "per_crew", "rate": 4.0}
