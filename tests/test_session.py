"""Tests for the calculator session (angle mode, history, chaining)."""

import unittest

import pytest

from hypercalc_pkg.config import ERROR_MARKER
from hypercalc_pkg.session import CalculatorSession
from hypercalc_pkg.types import AngleMode


class TestAngleMode(unittest.TestCase):
    """The session owns the angle mode and passes it to every call."""

    def test_initial_mode(self):
        self.assertIs(CalculatorSession("rad").angle_mode, AngleMode.RAD)
        self.assertIs(CalculatorSession(AngleMode.DEG).angle_mode, AngleMode.DEG)

    def test_toggle(self):
        session = CalculatorSession("deg")
        self.assertIs(session.toggle_angle_mode(), AngleMode.RAD)
        self.assertIs(session.toggle_angle_mode(), AngleMode.DEG)

    def test_mode_changes_trig_results(self):
        session = CalculatorSession("deg")
        self.assertAlmostEqual(session.evaluate("sin(90)").value, 1.0)
        session.set_angle_mode("RAD")
        self.assertAlmostEqual(session.evaluate("sin(90)").value, 0.8939966636, places=9)

    def test_invalid_mode(self):
        with self.assertRaises(ValueError):
            CalculatorSession("grad")


class TestChaining(unittest.TestCase):
    """Operator-led input continues from the previous result."""

    def test_chain_multiplication(self):
        session = CalculatorSession()
        self.assertEqual(session.evaluate("2+2").value, 4)
        self.assertEqual(session.evaluate("*2").value, 8)
        self.assertEqual(session.history, ["2+2 = 4", "4*2 = 8"])

    def test_chain_uses_standard_precedence(self):
        session = CalculatorSession()
        session.evaluate("4")
        self.assertEqual(session.evaluate("+2*3").value, 10)

    def test_chain_with_keypad_glyph(self):
        session = CalculatorSession()
        session.evaluate("3")
        self.assertEqual(session.evaluate("×3").value, 9)

    def test_chain_from_negative_result(self):
        session = CalculatorSession()
        self.assertEqual(session.evaluate("2-5").value, -3)
        self.assertEqual(session.expand_chain("*2"), "(0-3)*2")
        self.assertEqual(session.evaluate("*2").value, -6)

    def test_chain_from_fraction_keeps_precision(self):
        session = CalculatorSession()
        session.evaluate("1/3")
        self.assertAlmostEqual(session.evaluate("*3").value, 1.0, places=15)

    def test_no_chain_without_previous_result(self):
        session = CalculatorSession()
        self.assertEqual(session.expand_chain("*2"), "*2")
        self.assertEqual(session.evaluate("*2").error, ERROR_MARKER)

    def test_error_breaks_the_chain(self):
        session = CalculatorSession()
        session.evaluate("2+2")
        self.assertFalse(session.evaluate("1/0").ok)
        self.assertIsNone(session.last_value)
        self.assertEqual(session.evaluate("*2").error, ERROR_MARKER)

    def test_non_operator_input_starts_fresh(self):
        session = CalculatorSession()
        session.evaluate("2+2")
        self.assertEqual(session.evaluate("5*2").value, 10)


class TestHistory(unittest.TestCase):
    """History is kept in memory for the session."""

    def test_errors_are_recorded(self):
        session = CalculatorSession()
        session.evaluate("1/0")
        self.assertEqual(session.history, ["1/0 = Error"])

    def test_empty_input_is_not_recorded(self):
        session = CalculatorSession()
        result = session.evaluate("")
        self.assertTrue(result.is_empty)
        self.assertEqual(session.history, [])

    def test_clear(self):
        session = CalculatorSession()
        session.evaluate("2+2")
        session.clear()
        self.assertEqual(session.history, [])
        self.assertIsNone(session.last_value)

    def test_sessions_are_independent(self):
        first = CalculatorSession()
        second = CalculatorSession()
        first.evaluate("2+2")
        self.assertEqual(second.history, [])
        self.assertEqual(second.expand_chain("*2"), "*2")


class TestSessionSampling:
    """Graphing through the session."""

    def test_requires_free_variable(self):
        session = CalculatorSession()
        with pytest.raises(ValueError):
            session.sample("2+2", width=10, scale=1)

    def test_uses_session_angle_mode(self):
        session = CalculatorSession("deg")
        degrees = dict(session.sample("sin(x)", width=4, scale=1 / 45))
        session.toggle_angle_mode()
        radians = dict(session.sample("sin(x)", width=4, scale=1 / 45))
        assert degrees[0] == pytest.approx(-1.0)
        assert radians[0] != pytest.approx(-1.0)
