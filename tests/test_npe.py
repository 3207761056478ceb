"""Tests for NPE validation."""
import pytest

from slicetree import is_valid_npe, validate_npe
from floorplan.config import SAMPLE_NPES


class TestIsValidNpe:

    @pytest.mark.parametrize("npe", ["A", "ABV", "ABH", "ABVCV", "ABCVH"])
    def test_accepts_balloted_expressions(self, npe):
        assert is_valid_npe(npe) is True

    def test_rejects_repeated_operator(self):
        assert not is_valid_npe("AVV")
        assert not is_valid_npe("ABCVV")

    def test_rejects_duplicate_operand(self):
        assert not is_valid_npe("AAV")
        assert not is_valid_npe("ABVAV")

    def test_rejects_balloting_violation(self):
        assert not is_valid_npe("VAB")
        assert not is_valid_npe("AVBC")

    def test_rejects_operand_operator_mismatch(self):
        assert not is_valid_npe("ABC")
        assert not is_valid_npe("ABCV")

    def test_rejects_empty_expression(self):
        assert not is_valid_npe("")

    def test_alternating_operators_are_not_repeats(self):
        assert is_valid_npe("ABCHV")
        assert is_valid_npe("ABHCDVV") is False

    @pytest.mark.parametrize("npe", SAMPLE_NPES)
    def test_sample_expressions_are_valid(self, npe):
        assert is_valid_npe(npe)


class TestValidateNpe:

    def test_valid_result_is_truthy(self):
        check = validate_npe("ABV")
        assert check
        assert check.valid
        assert check.reason == ''

    def test_duplicate_operand_reports_first_occurrence(self):
        check = validate_npe("AAV")
        assert not check
        assert check.position == 0
        assert "repeated" in check.reason

    def test_repeated_operator_position(self):
        check = validate_npe("AVV")
        assert not check
        assert check.position == 1

    def test_balloting_violation_position(self):
        check = validate_npe("AVB")
        assert not check
        assert check.position == 1
        assert "balloting" in check.reason

    def test_count_mismatch_has_no_position(self):
        check = validate_npe("ABCV")
        assert not check
        assert check.position is None
