#!/usr/bin/env python3
"""
Basic Usage Example - Voltage Divider Designer

This script shows how to:
- Initialize the designer
- Solve a few common divider requests
- Inspect the chosen resistors and their metrics
- Handle rejected requests
- Request a narrative explanation without blocking

Run: python examples/basic_usage.py
"""

from vdiv_app.engine import DividerDesigner
from vdiv_app.models.results import ResistorPair

REQUESTS = [
    (12.0, 3.3, "12 V rail into a 3.3 V ADC"),
    (5.0, 3.3, "5 V logic down to 3.3 V"),
    (24.0, 2.5, "24 V sensor into a 2.5 V reference"),
    (5.0, 6.0, "Impossible: output above input"),
    (0.0, 3.3, "Impossible: zero input"),
]


def print_pair(pair: ResistorPair) -> None:
    """Print the metrics of a solved pair."""
    print(f"   R1 (top):     {pair.r1_formatted}")
    print(f"   R2 (bottom):  {pair.r2_formatted}")
    print(f"   Output:       {pair.actual_v_out:.4f} V ({pair.deviation_percent:+.3f}%)")
    print(f"   Power R1/R2:  {pair.power_r1 * 1000:.3f} mW / {pair.power_r2 * 1000:.3f} mW")
    print(f"   Impedance:    {pair.impedance:.1f} Ω")
    print(f"   {pair.message}")


def main() -> None:
    """Run the basic usage demo."""
    print("🔌 Voltage Divider Designer - Basic Usage")
    print("=" * 50)

    # Explanations need an API key; without one they fall back to fixed text
    with DividerDesigner() as designer:
        last = None
        for v_in, target, description in REQUESTS:
            print(f"\n{description}: {v_in} V → {target} V")
            result = designer.design(v_in, target)

            if result.best_pair is not None:
                print_pair(result.best_pair)
                last = (v_in, target, result.best_pair)
            else:
                print(f"   ❌ {result.error}")

        if last is not None:
            print("\nRequesting explanation for the last solved circuit...")
            future = designer.request_explanation(*last)
            print(future.result())

    print("\n✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
