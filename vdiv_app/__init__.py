"""
VDiv App - Voltage Divider Designer

Picks two standard E24 resistors that best approximate a requested
voltage-divider ratio, reports the electrical metrics of the chosen pair,
and optionally asks a text-generation service to explain the circuit.
"""

__version__ = "0.1.0"
__author__ = "VDiv Team"
