from __future__ import annotations

from forge.services import metabolic, planner
from forge.services.rules import first_match

RULES = (("strength", "heavy"), ("endurance", "light"))


def test_first_match_follows_rule_order_not_member_order() -> None:
    assert first_match(RULES, ["endurance", "strength"]) == "heavy"
    assert first_match(RULES, ["endurance"]) == "light"
    assert first_match(RULES, ["maintain"], default="base") == "base"
    assert first_match(RULES, []) is None


def test_planner_and_metabolic_share_rule_helpers() -> None:
    assert planner.first_match is first_match
    assert metabolic.first_match is first_match
    assert first_match.__module__ == "forge.services.rules"
