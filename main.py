#!/usr/bin/env python3
import logging

import arith
import easing
from exact import new
from solver import solve_cubic


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("2 ** (1/2) =", arith.sqrt(new(2)))
    print("(-8) ** (1/3) =", arith.cbrt(new(-8)))
    for root in solve_cubic(1, -6, 11, -6):
        print("x^3 - 6x^2 + 11x - 6 = 0: x =", root)

    for name in ("Linear_In", "Sine_InOut", "Back_Out"):
        ys = easing.convert(name, 0.5)
        xs = easing.invert(name, 0.5)
        print(f"{name}: convert(0.5) = {ys}, invert(0.5) = {xs}")


if __name__ == "__main__":
    main()
