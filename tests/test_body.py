import pytest

from particlesim.body import Body, demo_lines, main
from particlesim.vector import Vector


def test_filled_body():
    b = Body.filled(2)
    assert b.position == Vector(2, 2, 2)
    assert b.velocity == Vector(2, 2, 2)


def test_constructor_accepts_iterables():
    b = Body([1, 2, 3], (4, 5, 6))
    assert b.position == Vector(1, 2, 3)
    assert b.velocity == Vector(4, 5, 6)


def test_wrong_dimension_raises():
    with pytest.raises(ValueError):
        Body((1, 2), (1, 2, 3))


def test_add_sub_round_trip():
    a = Body((1.0, 2.0, 3.0), (3.0, 3.0, 3.0))
    b = Body((0.0, 2.0, 4.0), (1.0, 2.0, -1.0))
    assert (a + b) - b == a


def test_mul_applies_componentwise():
    a = Body((1, 2, 3), (4, 5, 6))
    b = Body((2, 2, 2), (1, 1, 1))
    result = a * b
    assert result.position == a.position * b.position
    assert result.velocity == a.velocity


def test_div_zero_divisor_behaviour():
    a = Body((4.0, 4.0, 4.0), (6.0, 6.0, 6.0))
    zero = Body.filled(0)
    assert a / zero == Body.filled(0)
    a /= zero
    assert a == Body((4.0, 4.0, 4.0), (6.0, 6.0, 6.0))


def test_inplace_ops_keep_identity():
    a = Body((1, 2, 3), (1, 1, 1))
    original = a
    a += Body((1, 1, 1), (1, 1, 1))
    a -= Body((1, 1, 1), (0, 0, 0))
    a *= Body((2, 2, 2), (3, 3, 3))
    a /= Body((2, 2, 2), (3, 3, 3))
    assert a is original
    assert a == Body((1, 2, 3), (2, 2, 2))


def test_str_format_of_zero_body():
    assert str(Body.filled()) == "Pos: [ 0 0 0 ] | Vel: [ 0 0 0 ]"


def test_demo_lines_structure():
    lines = demo_lines()
    assert len(lines) == 7
    assert lines[1] == lines[3] == lines[5] == ""
    assert lines[0] == "P0- " + str(Body.filled())
    assert lines[2] == "P1- " + str(Body((1, 2, 3), (3, 3, 3)))
    assert lines[4] == "P2- " + str(Body((0, 2, 4), (1, 2, -1)))


def test_demo_combined_line():
    assert demo_lines()[6] == "P3- Pos: [ 1 4 7 ] | Vel: [ 40 50 20 ]"


def test_main_prints_demo(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.splitlines() == demo_lines()