"""
Basic example of using unit-safe angles.
"""

from anglekit import (
    Degree,
    Gradian,
    Radian,
    UnitMismatchError,
    angle_cast,
    asin,
    sin,
)


def main():
    print("=" * 80)
    print("anglekit - Basic Example")
    print("=" * 80)

    # Arithmetic within one unit
    print("\nArithmetic...")
    heading = Degree(45.0)
    heading *= 10
    print(f"45 deg * 10 = {heading}")
    print(f"Normalized: {heading.normalized()}")
    print(f"Normalized (abs): {Degree(-90).normalized_abs()}")

    # Explicit conversion
    print("\n" + "-" * 80)
    print("Conversion...")
    print(f"180 deg in rad:  {angle_cast(Radian, Degree(180))}")
    print(f"90 deg in grad:  {angle_cast(Gradian, Degree(90)):.6f}")

    # Mixing units is an error
    print("\n" + "-" * 80)
    print("Mixing units...")
    try:
        heading + Radian(1.0)
    except UnitMismatchError as exc:
        print(f"Rejected: {exc}")

    # Trigonometry in any unit
    print("\n" + "-" * 80)
    print("Trigonometry...")
    print(f"sin(150 deg)   = {sin(Degree(150)):.6f}")
    print(f"asin(0.5) deg  = {asin(0.5, Degree):.6f}")
    print(f"asin(0.5) rad  = {asin(0.5):.6f}")
    print(f"asin(0.5) grad = {asin(0.5, Gradian):.6f}")


if __name__ == "__main__":
    main()
