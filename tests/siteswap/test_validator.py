"""Tests for siteswap parsing and validation."""

from __future__ import annotations

import logging

import pytest

from siteswap_planner.siteswap.errors import (
    AllZeroPattern,
    EmptyPattern,
    InvalidCharacter,
    LandingCollision,
    NonIntegerAverage,
    SiteswapError,
)
from siteswap_planner.siteswap.validator import PatternValidator, validate

# ---------------------------------------------------------------------------
# Accepted patterns
# ---------------------------------------------------------------------------

class TestValidPatterns:
    def test_531(self):
        """531 → three balls, period 3, highest throw 5."""
        result = validate("531")
        assert result.pattern == (5, 3, 1)
        assert result.period == 3
        assert result.ball_count == 3
        assert result.max_throw_height == 5

    def test_single_digit_has_period_one(self):
        result = validate("3")
        assert result.pattern == (3,)
        assert result.period == 1
        assert result.ball_count == 3

    def test_single_one_is_one_ball(self):
        assert validate("1").ball_count == 1

    def test_letters_map_to_heights_ten_and_up(self):
        """'a' is 10, 'b' is 11: 'b1' averages to 6 balls."""
        result = validate("b1")
        assert result.pattern == (11, 1)
        assert result.ball_count == 6
        assert result.max_throw_height == 11

    def test_uppercase_and_whitespace_are_normalized(self):
        assert validate(" 4 4\t1\n").pattern == (4, 4, 1)
        assert validate("B1") == validate("b1")

    def test_zeros_are_allowed_alongside_throws(self):
        result = validate("330")
        assert result.pattern == (3, 3, 0)
        assert result.ball_count == 2

    @pytest.mark.parametrize("text, balls", [
        ("441", 3),
        ("423", 3),
        ("51", 3),
        ("7531", 4),
        ("97531", 5),
        ("40", 2),
        ("z", 35),
    ])
    def test_common_siteswaps(self, text, balls):
        assert validate(text).ball_count == balls

    def test_validation_is_deterministic(self):
        assert validate("531") == validate("531")


class TestBallCountInvariant:
    @pytest.mark.parametrize("text", ["3", "531", "441", "b1", "330", "7531"])
    def test_ball_count_is_exact_average(self, text):
        result = validate(text)
        assert sum(result.pattern) == result.ball_count * result.period
        assert result.ball_count >= 1


# ---------------------------------------------------------------------------
# Rejected patterns
# ---------------------------------------------------------------------------

class TestInvalidPatterns:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty(self, text):
        with pytest.raises(EmptyPattern):
            validate(text)

    def test_invalid_character_is_named(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            validate("53-1")
        assert exc_info.value.character == "-"
        assert exc_info.value.position == 2
        assert "'-'" in str(exc_info.value)

    def test_invalid_character_position_ignores_whitespace(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            validate("5 3 ?")
        assert exc_info.value.position == 2

    @pytest.mark.parametrize("text", ["0", "000", "0 0"])
    def test_all_zero(self, text):
        with pytest.raises(AllZeroPattern):
            validate(text)

    def test_non_integer_average(self):
        """61: sum 7 over period 2."""
        with pytest.raises(NonIntegerAverage) as exc_info:
            validate("61")
        assert exc_info.value.total == 7
        assert exc_info.value.period == 2

    def test_landing_collision(self):
        """240: index 0 and index 1 both land in slot 2."""
        with pytest.raises(LandingCollision) as exc_info:
            validate("240")
        assert exc_info.value.slot == 2
        assert exc_info.value.indices == (0, 1)

    def test_landing_collision_in_integer_average_pattern(self):
        """432 averages to 3 but 4 and 3 both land on slot 1."""
        with pytest.raises(LandingCollision):
            validate("432")

    def test_checks_run_in_order(self):
        """A bad character is reported before the average is looked at."""
        with pytest.raises(InvalidCharacter):
            validate("6!1")

    def test_all_errors_are_value_errors(self):
        for text in ["", "x!", "00", "61", "240"]:
            with pytest.raises(SiteswapError):
                validate(text)
            with pytest.raises(ValueError):
                validate(text)


# ---------------------------------------------------------------------------
# Validator instance behaviour
# ---------------------------------------------------------------------------

class TestPatternValidator:
    def test_normalize(self):
        assert PatternValidator.normalize(" A b\tC ") == "abc"

    def test_instance_matches_shortcut(self):
        assert PatternValidator().validate("441") == validate("441")

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="siteswap_planner.siteswap.validator"):
            with pytest.raises(NonIntegerAverage):
                validate("61")
        assert "Rejected siteswap '61'" in caplog.text
