import pytest

from advent2024.day17 import find_initial_a, parse, part1, part2, run

EXAMPLE = """\
Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""

QUINE = """\
Register A: 2024
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0
"""

PROGRAM = [2, 4, 1, 1, 7, 5, 1, 5, 0, 3, 4, 3, 5, 5, 3, 0]


def test_parse_example():
    assert parse(EXAMPLE) == (729, 0, 0, [0, 1, 5, 4, 3, 0])


def test_part1_example():
    assert part1(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_part2_example():
    assert part2(QUINE) == 117440


def test_run_outputs_register_values():
    assert run([5, 0, 5, 1, 5, 4], 10) == [0, 1, 2]


def test_run_outputs_literal_operand():
    assert run([5, 3], 0) == [3]


def test_run_empty_program():
    assert run([], 5) == []


def test_found_value_reproduces_program():
    a = find_initial_a(PROGRAM)
    assert run(PROGRAM, a) == PROGRAM


def test_example_quine_reproduces_itself():
    _, _, _, program = parse(QUINE)
    assert run(program, part2(QUINE)) == program


def test_program_that_cannot_reproduce_itself():
    with pytest.raises(ValueError):
        find_initial_a([5, 3])


def test_reserved_combo_operand_is_rejected():
    with pytest.raises(ValueError):
        run([5, 7], 1)


def test_invalid_opcode_is_rejected():
    with pytest.raises(ValueError):
        run([8, 0], 1)


def test_malformed_input_is_rejected():
    with pytest.raises(ValueError):
        parse("Register A: 1\nRegister C: 0\n")