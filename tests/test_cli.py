import pytest

from numethods.cli import main
from numethods.magic import format_magic_square, generate_magic_square
from numethods.roots import bisection


def test_bisection_prints_root(capsys):
    assert main(["bisection", "-2", "0", "1e-6"]) == 0
    out = capsys.readouterr().out
    assert out == f"The root is: {format(bisection(-2, 0, 1e-6), 'g')}\n"


def test_bisection_bad_bracket(capsys):
    assert main(["bisection", "1", "2", "1e-6"]) == 1
    assert "You have not assumed right a and b" in capsys.readouterr().err


def test_lagrange_on_a_line(capsys):
    assert main(["lagrange", "--x", "1", "2", "3", "--y", "2", "4", "6", "--at", "2.5"]) == 0
    assert capsys.readouterr().out == "The value of f(2.5) is 5\n"


def test_lagrange_mismatched_lengths(capsys):
    assert main(["lagrange", "--x", "1", "2", "--y", "2", "--at", "1"]) == 1
    assert capsys.readouterr().err


def test_magic_prints_square(capsys):
    assert main(["magic", "3"]) == 0
    out = capsys.readouterr().out
    assert out == (
        "The Magic Square of size 3 x 3 is:\n"
        + format_magic_square(generate_magic_square(3))
    )


def test_magic_rejects_two(capsys):
    assert main(["magic", "2"]) == 1
    assert "Magic square is not possible" in capsys.readouterr().out


def test_series_at_zero(capsys):
    assert main(["series", "0", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Sum of sine series up to 5 terms: 0",
        "Sum of cosine series up to 5 terms: 1",
    ]


def test_marksheet_ranks_students(capsys):
    assert main(["marksheet", "zed:40,50", "amy:90,100"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Grading Scale:")
    rows = [line for line in out.splitlines() if line[:1].isdigit() and "\t" in line]
    assert rows[0].startswith("1\tamy\t190")
    assert rows[1].startswith("2\tzed\t90")


def test_marksheet_uneven_subjects(capsys):
    assert main(["marksheet", "a:10", "b:10,20"]) == 1
    assert "same number of subjects" in capsys.readouterr().err


def test_marksheet_bad_spec():
    with pytest.raises(SystemExit):
        main(["marksheet", "nocolon"])


def test_missing_command():
    with pytest.raises(SystemExit):
        main([])