#!/usr/bin/env python3
"""
Demo: building functions and finding their roots

Three scenarios:
  1. Primitives from the factory, evaluated and differentiated
  2. Composite trees built with + - * /
  3. Newton's method on 3x^2 + 2x - 5 (roots at 1 and -5/3)

Run with --verbose to see every Newton step.
"""

import logging
import sys
import os
import numpy as np

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from function_algebra import FunctionFactory, newton_solve


def scenario_primitives(fact: FunctionFactory):
    """Build each primitive by name and tabulate it."""
    print("-" * 64)
    print("  SCENARIO 1: PRIMITIVES")
    print("-" * 64)
    print()

    specs = [
        ("const", 23),
        ("ident", None),
        ("power", 3),
        ("exp", 2),
        ("polynomial", [1, 2, 5]),
    ]
    x = 2.0
    print(f"  {'name':>12s}  {'formula':>14s}  {'f(2)':>12s}  {'f`(2)':>12s}")
    for name, value in specs:
        f = fact.create_object(name, value)
        print(f"  {name:>12s}  {f.render():>14s}  "
              f"{f.evaluate(x):12.4f}  {f.derivative(x):12.4f}")
    print()


def scenario_composites(fact: FunctionFactory):
    """Combine 1 + 6x and x^4 with every operator."""
    print("-" * 64)
    print("  SCENARIO 2: COMPOSITES of a = 1+6x, b = x^4")
    print("-" * 64)
    print()

    a = fact.create_object("polynomial", [1, 6])
    b = fact.create_object("power", 4)
    xs = np.array([1.0, 2.0])
    for f in [a + b, a - b, a * b, a / b]:
        values = f.evaluate(xs)
        ders = f.derivative(xs)
        print(f"  {f.render():>16s}   f={np.round(values, 4)}  f'={np.round(ders, 4)}")
    print()


def scenario_newton(fact: FunctionFactory):
    """Find both roots of 3x^2 + 2x - 5."""
    print("-" * 64)
    print("  SCENARIO 3: NEWTON'S METHOD on 3x^2 + 2x - 5")
    print("-" * 64)
    print()

    f = fact.create_object("polynomial", [-5, 2, 3])
    for x0 in [-7.0, 5.0]:
        result = newton_solve(f, x0, max_iter=100, eps=1e-4)
        print(f"  x0={x0:6.1f}  ->  x={result.x:.6f}  "
              f"steps={result.iterations}  residual={result.residual:.2e}  "
              f"converged={result.converged}")
    print()


def main():
    if "--verbose" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print()
    print("=" * 64)
    print("  FUNCTION ALGEBRA DEMO")
    print("=" * 64)
    print()

    fact = FunctionFactory()
    scenario_primitives(fact)
    scenario_composites(fact)
    scenario_newton(fact)


if __name__ == "__main__":
    main()
