import pytest

from habitat_designer.errors import InvalidMissionContext
from habitat_designer.evaluator import assess, evaluate
from habitat_designer.models import MissionContext, Zone
from habitat_designer.presets import default_design
from habitat_designer.rules import RULES

CYLINDER_FLOOR = 28.274333882308138


def zone(zid, name, area):
    return Zone(id=zid, name=name, area_m2=area)


def full_zones(crew: int = 4):
    return [
        zone(1, "Sleep", 4 * crew),
        zone(2, "Recreation", 2 * crew),
        zone(3, "Exercise", 3 * crew),
        zone(4, "Hygiene", 3),
        zone(5, "ECLSS", 4),
        zone(6, "Stowage", 0.5 * crew * 6),
    ]


def by_rule(results):
    return {r.rule: r for r in results if r.rule}


def test_sleep_too_small_and_eclss_ok():
    mission = MissionContext(crew_size=4, mission_days=180)
    results = evaluate([zone(1, "Sleep", 6), zone(2, "ECLSS", 4)], mission, CYLINDER_FLOOR)
    checks = by_rule(results)

    assert not checks["Sleep"].ok
    assert checks["Sleep"].message == "Sleep TOO SMALL: 6.0 m^2 < required 16.0 m^2"
    assert checks["Sleep"].required_m2 == 16
    assert checks["ECLSS"].ok
    assert checks["ECLSS"].message == "ECLSS OK: 4.0 m^2 >= required 4.0 m^2"


def test_results_follow_table_order_then_total():
    mission = MissionContext(crew_size=2, mission_days=30)
    results = evaluate(list(reversed(full_zones(2))), mission, 1000)
    assert [r.rule for r in results] == [*RULES, None]
    assert all(r.ok for r in results)
    assert results[-1].message.startswith("Total zones")


def test_missing_zone_reported_without_aborting():
    mission = MissionContext(crew_size=4, mission_days=180)
    zones = [z for z in full_zones() if z.name != "Exercise"]
    results = evaluate(zones, mission, 1000)

    missing = [r for r in results if r.message.startswith("Missing zone")]
    assert len(missing) == 1
    assert missing[0].message == "Missing zone: Exercise"
    assert not missing[0].ok
    assert missing[0].required_m2 is None
    assert len(results) == len(RULES) + 1
    assert results[-1].ok


def test_stowage_scales_with_mission_length():
    mission = MissionContext(crew_size=4, mission_days=180)
    results = by_rule(evaluate([zone(1, "Stowage", 11.9)], mission, 100))
    assert results["Stowage"].required_m2 == pytest.approx(12.0)
    assert not results["Stowage"].ok

    short = MissionContext(crew_size=4, mission_days=15)
    results = by_rule(evaluate([zone(1, "Stowage", 1.0)], short, 100))
    assert results["Stowage"].required_m2 == pytest.approx(1.0)
    assert results["Stowage"].ok


def test_total_area_exceeding_floor_fails():
    mission = MissionContext(crew_size=4, mission_days=180)
    zones = [zone(1, "Sleep", 16), zone(2, "Lab", 10), zone(3, "ECLSS", 4)]
    results = evaluate(zones, mission, CYLINDER_FLOOR)
    total = results[-1]
    assert not total.ok
    assert total.rule is None
    assert total.message == "TOTAL AREA EXCEEDS USABLE FLOOR AREA: 30.0 m^2 > floor 28.3 m^2"


def test_total_counts_unmatched_zones():
    mission = MissionContext(crew_size=1, mission_days=30)
    results = evaluate([zone(1, "Lab", 5), zone(2, "Lab", 5)], mission, 12)
    assert results[-1].actual_m2 == 10
    assert results[-1].ok


def test_duplicate_names_last_one_wins():
    mission = MissionContext(crew_size=4, mission_days=180)
    zones = [zone(1, "Sleep", 20), zone(2, "Sleep", 2)]
    assert not by_rule(evaluate(zones, mission, 100))["Sleep"].ok

    zones = [zone(1, "Sleep", 2), zone(2, "Sleep", 20)]
    assert by_rule(evaluate(zones, mission, 100))["Sleep"].ok


def test_evaluate_is_idempotent():
    mission = MissionContext(crew_size=3, mission_days=90)
    zones = full_zones(3)[:4]
    assert evaluate(zones, mission, 40) == evaluate(zones, mission, 40)


@pytest.mark.parametrize("crew, days", [(0, 180), (-2, 180), (4, 0), (4, -30)])
def test_invalid_mission_context(crew, days):
    with pytest.raises(InvalidMissionContext):
        evaluate(full_zones(), MissionContext(crew_size=crew, mission_days=days), 100)


def test_assess_default_design():
    assessment = assess(default_design())
    assert assessment.geometry.floor_area_m2 == pytest.approx(CYLINDER_FLOOR)
    assert assessment.total_zone_area_m2 == 18
    assert not assessment.passed
    assert [c.rule for c in assessment.failures] == [
        "Sleep",
        "Recreation",
        "Exercise",
        "Hygiene",
        "Stowage",
    ]
    assert assessment.checks[-1].ok


def test_padded_zone_name_does_not_satisfy_rule():
    mission = MissionContext(crew_size=4, mission_days=180)
    results = evaluate([zone(1, "Sleep ", 20)], mission, 100)
    assert results[0].message == "Missing zone: Sleep"
    assert not results[0].ok
    assert results[-1].actual_m2 == 20
