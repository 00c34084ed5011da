import dataclasses
import re

import pytest

from sta_advisor.core.catalog import (
    CLOCK_UNCERTAINTY,
    DEFAULT_CATALOG,
    HIGH_FANOUT,
    LONG_LOGIC_PATH,
    LOW_DRIVE_STRENGTH,
    TIMING_VIOLATION,
    PatternCatalog,
    PatternRule,
)
from sta_advisor.core.model import TimingIssue


class TestDefaultCatalog:
    def test_order(self) -> None:
        assert DEFAULT_CATALOG.labels() == [
            TIMING_VIOLATION,
            HIGH_FANOUT,
            LOW_DRIVE_STRENGTH,
            CLOCK_UNCERTAINTY,
            LONG_LOGIC_PATH,
        ]

    def test_suggestion_counts(self) -> None:
        assert [len(rule.suggestions) for rule in DEFAULT_CATALOG] == [4, 3, 3, 3, 3]

    def test_len(self) -> None:
        assert len(DEFAULT_CATALOG) == 5

    @pytest.mark.parametrize(
        ("text", "label"),
        [
            ("slack (VIOLATED)", TIMING_VIOLATION),
            ("Slack (violated)", TIMING_VIOLATION),
            ("warning: HIGH FANOUT net n123", HIGH_FANOUT),
            ("u1/Y (INVX0_RVT)", LOW_DRIVE_STRENGTH),
            ("u1/Y (NAND2X0_RVT)", LOW_DRIVE_STRENGTH),
            ("u1/Y (NOR2X0_RVT)", LOW_DRIVE_STRENGTH),
            ("u1/Y (BUFX0_RVT)", LOW_DRIVE_STRENGTH),
            ("Clock Uncertainty  -0.050", CLOCK_UNCERTAINTY),
            ("this is a long path", LONG_LOGIC_PATH),
        ],
    )
    def test_single_rule_match(self, text: str, label: str) -> None:
        assert [issue.issue for issue in DEFAULT_CATALOG.match(text)] == [label]

    def test_higher_drive_strength_not_flagged(self) -> None:
        assert DEFAULT_CATALOG.match("u1/Y (INVX1_RVT)\nu2/Y (NAND2X2_RVT)") == []

    def test_multiple_matches_in_catalog_order(self) -> None:
        text = "long path\nclock uncertainty\nhigh fanout\nslack (VIOLATED)"
        assert [issue.issue for issue in DEFAULT_CATALOG.match(text)] == [
            TIMING_VIOLATION,
            HIGH_FANOUT,
            CLOCK_UNCERTAINTY,
            LONG_LOGIC_PATH,
        ]

    def test_each_rule_reported_once(self) -> None:
        text = "u1/Y (INVX0_RVT)\nu2/Y (INVX0_RVT)\nu3/Y (BUFX0_RVT)"
        assert DEFAULT_CATALOG.match(text) == [
            TimingIssue(
                LOW_DRIVE_STRENGTH,
                (
                    "Upsize cells to higher drive strength variants",
                    "Replace X0 cells with X1 or X2 variants",
                    "Consider using faster cell types (e.g., RVT to LVT)",
                ),
            )
        ]

    def test_no_match(self) -> None:
        assert DEFAULT_CATALOG.match("") == []


class TestPatternRule:
    def test_compile_is_case_insensitive(self) -> None:
        rule = PatternRule.compile(r"setup time", "Setup", "Check library")
        assert rule.pattern.flags & re.IGNORECASE
        assert rule.matches("LIBRARY SETUP TIME")
        assert rule.suggestions == ("Check library",)

    def test_to_issue(self) -> None:
        rule = PatternRule.compile(r"x", "Label", "a", "b")
        assert rule.to_issue() == TimingIssue("Label", ("a", "b"))

    def test_rules_are_immutable(self) -> None:
        rule = next(iter(DEFAULT_CATALOG))
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.issue = "changed"  # type: ignore[misc]

    def test_custom_catalog(self) -> None:
        catalog = PatternCatalog(
            rules=(PatternRule.compile(r"hold", "Hold check", "Add delay cells"),)
        )
        assert catalog.labels() == ["Hold check"]
        assert catalog.match("Hold Check with Pin") == [
            TimingIssue("Hold check", ("Add delay cells",))
        ]
