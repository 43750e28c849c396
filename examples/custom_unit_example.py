"""
Example of defining a custom angular unit with integer storage.
"""

from anglekit import AngleUnit, BasicAngle, Degree, acos, angle_cast, cos


class BinaryDegreeUnit(AngleUnit):
    """256 steps per turn, as used by 8-bit heading encoders."""

    SEMICIRCLE = 128
    SYMBOL = "brad"


BinaryDegree = BasicAngle[int, BinaryDegreeUnit]


def main():
    print("=" * 80)
    print("anglekit - Custom Unit Example")
    print("=" * 80)

    for x in (0, 1, -1):
        print(f"acos({x:>2}) = {acos(x, BinaryDegree)} brad")

    for value in (43, -128, 0):
        print(f"cos({value:>4} brad) = {cos(BinaryDegree(value)):.6f}")

    print(f"90 deg = {angle_cast(BinaryDegree, Degree(90))} brad")
    print(f"300 brad normalized = {BinaryDegree(300).normalized()} brad")


if __name__ == "__main__":
    main()
