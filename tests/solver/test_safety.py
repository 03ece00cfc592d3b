"""Tests for safety classification"""

from vdiv_app.config.defaults import SAFETY_TOLERANCE_VOLTS
from vdiv_app.solver.safety import classify, is_within_tolerance


class TestTolerance:
    """Test the overshoot tolerance check"""

    def test_constant(self):
        assert SAFETY_TOLERANCE_VOLTS == 0.05

    def test_below_target_is_safe(self):
        assert is_within_tolerance(3.2, 3.3) is True

    def test_small_overshoot_is_safe(self):
        assert is_within_tolerance(3.34, 3.3) is True

    def test_large_overshoot_is_unsafe(self):
        assert is_within_tolerance(3.4, 3.3) is False

    def test_custom_tolerance(self):
        assert is_within_tolerance(3.4, 3.3, tolerance=0.2) is True
        assert is_within_tolerance(3.31, 3.3, tolerance=0.0) is False


class TestClassify:
    """Test message templates"""

    def test_success_message(self):
        message = classify(True, "24kΩ", "9.1kΩ", 3.2990936)
        assert message == (
            "Success! You are free to build. Use 24kΩ and 9.1kΩ for a hassle-free 3.30V."
        )

    def test_caution_message(self):
        message = classify(False, "1kΩ", "1kΩ", 5.0)
        assert message == (
            "Caution: This is the best match, but it runs a bit high (5.00V). Watch your pins!"
        )

    def test_caution_omits_resistors(self):
        message = classify(False, "24kΩ", "9.1kΩ", 3.5)
        assert "24kΩ" not in message
        assert "3.50V" in message
