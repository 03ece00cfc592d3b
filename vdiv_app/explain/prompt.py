"""Prompt text for the explanation service."""

from typing import TYPE_CHECKING

from ..solver.formatting import format_voltage

if TYPE_CHECKING:
    from .base import ExplanationRequest


def build_prompt(request: "ExplanationRequest") -> str:
    """Describe the circuit and ask for a hobbyist-friendly walkthrough."""
    return (
        "I am building a voltage divider circuit.\n"
        f"Input Voltage: {request.v_in}V\n"
        f"Desired Output: {request.target_v_out}V\n"
        f"Actual Output with standard resistors: {format_voltage(request.actual_v_out)}V\n"
        f"R1 (Top Resistor): {request.r1_formatted}\n"
        f"R2 (Bottom Resistor): {request.r2_formatted}\n"
        "\n"
        "Please explain to a hobbyist:\n"
        "1. What this circuit does in simple terms.\n"
        "2. Why these specific resistor values were chosen (briefly mention E24 series).\n"
        "3. Any safety warnings (power dissipation, heat, or input impedance for microcontrollers).\n"
        '4. Keep the tone friendly, encouraging, and "free-spirited".\n'
        "Use markdown for formatting.\n"
    )
