"""End-to-end tests for the public solve/sample API."""

import math

import pytest

from hypercalc_pkg.api import sample_function, solve, validate_expression
from hypercalc_pkg.config import ERROR_MARKER
from hypercalc_pkg.types import EvalResult, SampleResult


class TestArithmetic:
    """solve() follows standard evaluation order."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("2+3*4", 14),
            ("(2+3)*4", 20),
            ("2^3^2", 512),
            ("8-3-2", 3),
            ("100/10/2", 5),
            ("2*3^2", 18),
            ("10/4", 2.5),
            ("6÷3", 2),
            ("2×3", 6),
            ("((1+2)*(3+4))", 21),
            ("2 + 3 * 4", 14),
        ],
    )
    def test_values(self, expression, expected):
        result = solve(expression)
        assert result.ok is True
        assert result.value == pytest.approx(expected)


class TestFunctions:
    """Function calls and constants."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("log(100)", 2),
            ("ln(1)", 0),
            ("sqrt(16)", 4),
            ("sqrt(2)^2", 2),
            ("cbrt(27)", 3),
            ("exp(0)", 1),
            ("abs(2-5)", 3),
            ("floor(2.7)", 2),
            ("ceil(2.1)", 3),
            ("round(2.5)", 3),
            ("2*pi", 2 * math.pi),
            ("ln(e)", 1),
        ],
    )
    def test_values(self, expression, expected):
        assert solve(expression).value == pytest.approx(expected)

    def test_sine_depends_on_angle_mode(self):
        assert solve("sin(90)", "deg").value == pytest.approx(1.0)
        assert solve("sin(90)", "rad").value == pytest.approx(0.8939966636)

    def test_cosine_and_tangent_in_degrees(self):
        assert solve("cos(60)", "deg").value == pytest.approx(0.5)
        assert solve("tan(45)", "deg").value == pytest.approx(1.0)

    def test_angle_mode_does_not_affect_other_functions(self):
        assert solve("sqrt(90)", "deg").value == solve("sqrt(90)", "rad").value
        assert solve("log(90)", "deg").value == solve("log(90)", "rad").value

    def test_default_angle_mode_is_degrees(self):
        assert solve("sin(30)").value == pytest.approx(0.5)


class TestIntermediateInfinities:
    """Only the final value has to be finite."""

    @pytest.mark.parametrize(
        "expression", ["1/(1/0)", "1/10^400", "1/exp(1000)", "2^(0-2000)"]
    )
    def test_vanishing_results(self, expression):
        result = solve(expression)
        assert result.ok is True
        assert result.value == 0.0
        assert result.result == "0"

    def test_infinity_through_function(self):
        assert solve("atan(1/0)", "rad").value == pytest.approx(math.pi / 2)


class TestEmptyAndErrorStates:
    """Empty input and failures are distinct states."""

    @pytest.mark.parametrize("expression", ["", "   "])
    def test_empty_input(self, expression):
        result = solve(expression)
        assert result.ok is True
        assert result.is_empty
        assert result.error is None
        assert result.value is None

    @pytest.mark.parametrize(
        "expression",
        [
            "1/0",
            "log(0)",
            "ln(0-1)",
            "sqrt(0-4)",
            "10^400",
            "foo(2)",
            "x+1",
            "2+",
            "-5",
            "1.2.3",
            "()",
        ],
    )
    def test_failures_collapse_to_single_marker(self, expression):
        result = solve(expression)
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.error == ERROR_MARKER
        assert not result.is_empty

    def test_input_length_limit(self):
        from hypercalc_pkg.config import MAX_INPUT_LENGTH

        result = solve("1+" * MAX_INPUT_LENGTH + "1")
        assert result.error == ERROR_MARKER

    def test_lenient_characters_are_ignored(self):
        assert solve("2 + 2 =").value == 4
        assert solve("$3*3").value == 9


class TestMalformedParentheses:
    """Unbalanced input never escapes as an exception."""

    @pytest.mark.parametrize(
        "expression", ["(2+3", "2+3)", "((2", ")(", "sin(", "(", ")", "(((1)"]
    )
    def test_no_unhandled_fault(self, expression):
        result = solve(expression)
        assert isinstance(result, EvalResult)
        assert result.ok or result.error == ERROR_MARKER

    def test_missing_close_is_completed(self):
        assert solve("(2+3").value == 5
        assert solve("sqrt(16").value == 4


class TestChaining:
    """Consecutive calls do not share state."""

    def test_result_fed_back(self):
        first = solve("2+2")
        assert first.value == 4
        second = solve(first.result + "*2")
        assert second.value == 8

    def test_error_does_not_leak(self):
        assert solve("1/0").ok is False
        assert solve("2+2").value == 4
        assert solve("sin(90)", "rad").value == pytest.approx(math.sin(90))
        assert solve("sin(90)", "deg").value == pytest.approx(1.0)


class TestResultShape:
    """EvalResult formatting and serialisation."""

    def test_to_dict(self):
        assert solve("2+2").to_dict() == {"ok": True, "value": 4.0, "result": "4"}
        assert solve("1/0").to_dict() == {"ok": False, "error": ERROR_MARKER}
        assert solve("").to_dict() == {"ok": True}

    def test_formatted_result(self):
        assert solve("0.1+0.2").result == "0.3"
        assert solve("1/3").result == "0.3333333333"

    def test_exact_hint(self):
        assert solve("1/2").exact == "1/2"
        assert solve("4").exact is None

    def test_no_zero_hint_for_tiny_values(self):
        result = solve("1/7^50")
        assert result.value > 0
        assert result.exact is None
        assert solve("10^(0-300)").exact is None

    def test_repr(self):
        assert "EvalResult" in repr(solve("2+2"))
        assert "error='Error'" in repr(solve("1/0"))


class TestSampleFunction:
    """sample_function() wraps the sampler in a SampleResult."""

    def test_points(self):
        result = sample_function("x", width=4, scale=2)
        assert isinstance(result, SampleResult)
        assert result.ok is True
        assert result.points == [(0, -1.0), (1, -0.5), (2, 0.0), (3, 0.5)]

    def test_invalid_scale(self):
        result = sample_function("x", width=4, scale=0)
        assert result.ok is False
        assert "scale" in result.error

    def test_to_dict(self):
        result = sample_function("x", width=2, scale=1)
        assert result.to_dict() == {"ok": True, "points": [[0, -1.0], [1, 0.0]]}


class TestValidateExpression:
    """validate_expression() compiles without evaluating."""

    def test_valid(self):
        assert validate_expression("sin(x)") == (True, None)
        # Division by zero is only detected when evaluating
        assert validate_expression("1/0") == (True, None)

    def test_unknown_name(self):
        is_valid, error = validate_expression("foo(2)")
        assert is_valid is False
        assert "foo" in error
