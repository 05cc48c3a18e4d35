# numethods

A small collection of classic numerical methods in pure Python, with no
third-party dependencies.

## What it covers

| Module                     | Functions                                                                                     |
|----------------------------|-----------------------------------------------------------------------------------------------|
| `numethods.roots`          | `bisection`, `false_position`, `newton_raphson`, sample functions `cubic`, `quadratic`, `quadratic_derivative` |
| `numethods.curvefit`       | `linear_fit`, `parabolic_fit`, `cubic_fit`                                                    |
| `numethods.linalg`         | `forward_eliminate`, `gauss_jordan`, `back_substitute`, `solve_gauss`, `solve_gauss_jordan`, `gauss_seidel`, `matmul`, `format_matrix` |
| `numethods.integration`    | `trapezoidal`, `booles`, `weddles`                                                            |
| `numethods.interpolation`  | `lagrange`, `newton_forward`, `newton_backward`, `gauss_backward`, `newton_divided`, `forward_difference_table`, `backward_difference_table`, `divided_difference_table` |
| `numethods.ode`            | `modified_euler`, `milne`, `runge_kutta_4`, `taylor`, sample equation `product`               |
| `numethods.series`         | `sine_series`, `cosine_series`                                                                |
| `numethods.magic`          | `generate_magic_square`, `format_magic_square`                                                |
| `numethods.marksheet`      | `Student`, `total_marks`, `percentage`, `grade_for`, `grading_scale`, `make_student`, `rank_students`, `format_marksheet` |
| `numethods.cli`            | `main`, the `numethods` command                                                               |

## Installation

```
pip install numethods
```

## Examples

Finding a root of `x^3 - x^2 + 2` between -2 and 0:

```python
from numethods.roots import bisection, cubic

root = bisection(-2.0, 0.0, 1e-6, cubic)   # close to -1.0
```

`bisection` and `false_position` raise `ValueError` when `f` has the same
sign at both ends of the interval, and all three root finders raise
`ValueError` for a tolerance that is not positive.

Solving a linear system given as an augmented matrix (n rows of n + 1
entries):

```python
from numethods.linalg import solve_gauss, gauss_seidel

solve_gauss([[2, 1, 5], [1, 3, 10]])                       # [1.0, 3.0]
gauss_seidel([[4, -1, 15], [-1, 4, 10]], 1000, 1e-6)
```

A zero pivot raises `ZeroDivisionError`; no row swapping is done.

Multiplying two matrices:

```python
from numethods.linalg import matmul

matmul([[1, 2, 3], [4, 5, 6]], [[7, 8], [9, 10], [11, 12]])
# [[58, 64], [139, 154]]
```

Integrating `1 / (1 + x^2)` over `[0, 1]` with six trapezoids:

```python
from numethods.integration import trapezoidal

trapezoidal(lambda x: 1 / (1 + x * x), 0.0, 1.0, 6)   # about 0.7842
```

Interpolating with Lagrange polynomials:

```python
from numethods.interpolation import lagrange

lagrange([1.0, 2.0, 3.0], [1.0, 4.0, 9.0], 2.5)   # 6.25
```

The Newton forward, backward and Gauss backward formulas take the step from
the first two x values and assume the points are equally spaced.

Solving `dy/dx = x * y` with fourth-order Runge–Kutta:

```python
from numethods.ode import product, runge_kutta_4

xs, ys = runge_kutta_4(product, 0.0, 1.0, 0.1, 10)   # 11 x values and 11 y values
```

`modified_euler`, `milne` and `runge_kutta_4` return the lists of x and y
values, starting with the initial point. `milne` needs at least 4 steps.
`taylor(x, h, x1, y)` solves the fixed equation `dy/dx = 2y + 3e^x` and
returns the `(x, y)` pair reached after each step.

Summing series:

```python
from numethods.series import sine_series, cosine_series

sine_series(1.0, 10)     # close to sin(1)
cosine_series(1.0, 10)   # close to cos(1)
```

Building a magic square:

```python
from numethods.magic import generate_magic_square

generate_magic_square(3)
# [[8, 1, 6], [3, 5, 7], [4, 9, 2]]
```

Sizes below 1, and the even sizes 2, raise `ValueError`.

Ranking students (every subject is marked out of 100):

```python
from numethods.marksheet import make_student, rank_students, format_marksheet

students = [make_student("Asha", [91, 88, 95]), make_student("Ben", [72, 80, 64])]
print(format_marksheet(rank_students(students)))
```

## Command line

The `numethods` command runs five of the methods from its arguments:

```
numethods bisection -2 0 0.0001
numethods lagrange --x 1 2 3 --y 1 4 9 --at 2.5
numethods magic 3
numethods marksheet Asha:91,88,95 Ben:72,80,64
numethods series 1.0 10
```

- `bisection A B TOLERANCE` finds a root of `x^3 - x^2 + 2` in `[A, B]`.
- `lagrange --x ... --y ... --at X` evaluates the Lagrange polynomial at `X`.
- `magic N` prints an N x N magic square.
- `marksheet NAME:MARK,MARK,...` prints the grading scale and the ranked
  marksheet; every student must have the same number of marks.
- `series X TERMS` prints the sine and cosine series sums at `X` radians.

Each command exits with status 0 on success and 1 when its input is
rejected. See `numethods --help` and `numethods COMMAND --help`.

## What it does not do

- The command does not prompt for input; everything is passed as arguments.
- Only the five commands above are available from the command line; curve
  fitting, linear systems, integration, the other interpolation formulas and
  the ODE solvers are used from Python.
- The bisection command always works on `x^3 - x^2 + 2`; other functions are
  passed to `numethods.roots.bisection` from Python.

## Running the tests

```
pip install numethods[test]
pytest
```