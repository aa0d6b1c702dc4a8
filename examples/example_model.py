"""
Example: Building a MIP model with mipmodel

This example builds a small mixed-integer problem, copies it, and exports
the copy to arrays a solver back-end can consume.

Problem:
    maximize     x + y
    subject to  -2*x + 2*y >= 1
                -8*x + 10*y <= 13
                 0 <= x <= 100 (float), 0 <= y <= 100 (int)
"""

from mipmodel import ConstraintSense, Model


def main():
    print()
    print("=" * 70)
    print("mipmodel Example: Building a Model - Python")
    print("=" * 70)
    print()

    # Step 1: Create model and variables
    model = Model("example")
    x = model.new_float(0.0, 100.0)
    y = model.new_int(0, 100)
    x.name = "x"
    y.name = "y"

    # Step 2: Add constraints
    c1 = model.new_constraint(ConstraintSense.GE, 1.0)
    c1.new_term(-2.0, x)
    c1.new_term(2.0, y)
    c1.name = "lower"

    c2 = model.new_constraint(ConstraintSense.LE, 13.0)
    c2.new_term(-8.0, x)
    c2.new_term(10.0, y)
    c2.name = "upper"

    # Step 3: Set the objective, declaring x twice on purpose
    model.objective.set_maximize()
    model.objective.new_term(0.5, x)
    model.objective.new_term(0.5, x)
    model.objective.new_term(1.0, y)

    term, definitions = model.objective.term(x)
    print(f"Objective term for x: {term} ({definitions} definitions)")
    print()
    print(model)

    # Step 4: Copy and export
    clone = model.copy()
    form = clone.to_standard_form()
    print(f"Standard form: {form.m} constraints, {form.n} variables, {form.nnz} nonzeros")
    print("A =")
    print(form.A.toarray())
    print(f"AL = {form.AL}")
    print(f"AU = {form.AU}")
    print(f"c  = {form.c}")
    print(f"integrality = {form.integrality}")
    print()
    print("=" * 70)
    print()


if __name__ == "__main__":
    main()
