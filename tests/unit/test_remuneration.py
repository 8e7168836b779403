"""Tests for the standard monthly remuneration lookup."""

import pytest

from shussan.sdk import list_brackets, standard_remuneration


TABLE = [
    58000, 68000, 78000, 88000, 98000,
    104000, 110000, 118000, 126000, 134000,
    142000, 150000, 160000, 170000, 180000,
    190000, 200000, 220000, 240000, 260000,
    280000, 300000, 320000, 340000, 360000,
    380000, 410000, 440000, 470000, 500000,
]


class TestRemunerationTable:
    """The built-in table must match the published grades exactly."""

    def test_table_is_reproduced_verbatim(self, rules):
        assert list(rules.standard_remuneration_table) == TABLE

    def test_table_has_thirty_grades(self, rules):
        assert len(rules.standard_remuneration_table) == 30


class TestStandardRemuneration:
    """Midpoint lookup and clamping."""

    @pytest.mark.parametrize("salary", [0, 1, 30000, 57999])
    def test_below_first_grade_clamps_to_first(self, rules, salary):
        assert standard_remuneration(salary, rules) == 58000

    @pytest.mark.parametrize("salary", [500000, 500001, 1000000, 5000000])
    def test_at_or_above_last_grade_clamps_to_last(self, rules, salary):
        assert standard_remuneration(salary, rules) == 500000

    def test_exact_midpoint_goes_to_upper_grade(self, rules):
        """Midpoint of 58000/68000 is 63000; salary < midpoint picks the lower grade."""
        assert standard_remuneration(63000, rules) == 68000
        assert standard_remuneration(62999, rules) == 58000

    def test_midpoint_near_top_of_table(self, rules):
        """Midpoint of 470000/500000 is 485000."""
        assert standard_remuneration(484999, rules) == 470000
        assert standard_remuneration(485000, rules) == 500000

    @pytest.mark.parametrize("grade", TABLE)
    def test_grade_value_maps_to_itself(self, rules, grade):
        assert standard_remuneration(grade, rules) == grade

    def test_common_salaries(self, rules):
        assert standard_remuneration(200000, rules) == 200000
        assert standard_remuneration(250000, rules) == 260000
        assert standard_remuneration(300000, rules) == 300000
        assert standard_remuneration(395000, rules) == 410000

    def test_result_is_always_a_table_value(self, rules):
        for salary in range(0, 600001, 1000):
            assert standard_remuneration(salary, rules) in TABLE

    def test_uses_loaded_rules_by_default(self):
        assert standard_remuneration(300000) == 300000


class TestListBrackets:
    """Salary ranges per grade."""

    def test_first_and_last_are_open_ended(self, rules):
        rows = list_brackets(rules)
        assert rows[0]["salary_from"] is None
        assert rows[-1]["salary_below"] is None

    def test_ranges_use_midpoints(self, rules):
        rows = list_brackets(rules)
        assert rows[0] == {"grade": 1, "remuneration": 58000, "salary_from": None, "salary_below": 63000}
        assert rows[1]["salary_from"] == 63000
        assert rows[1]["salary_below"] == 73000

    def test_midpoints_are_whole_yen(self, rules):
        for row in list_brackets(rules):
            for bound in (row["salary_from"], row["salary_below"]):
                assert bound is None or isinstance(bound, int)

    def test_ranges_agree_with_lookup(self, rules):
        for row in list_brackets(rules):
            if row["salary_from"] is not None:
                assert standard_remuneration(row["salary_from"], rules) == row["remuneration"]
            if row["salary_below"] is not None:
                assert standard_remuneration(row["salary_below"] - 1, rules) == row["remuneration"]
