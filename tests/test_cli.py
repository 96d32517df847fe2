import pytest

from pushswap.cli import main
from pushswap.stack import Machine


def _assert_sorts(values, output):
    machine = Machine(values)
    for name in output.split():
        machine.apply(name)
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0


@pytest.mark.parametrize("argv", [[], [""]])
def test_no_input_returns_one_silently(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_single_string_is_split_on_spaces(capsys):
    assert main(["3 2  1 5 4"]) == 0
    _assert_sorts([3, 2, 1, 5, 4], capsys.readouterr().out)


def test_separate_arguments(capsys):
    assert main(["+5", "-3", "0", "12", "7", "-40"]) == 0
    _assert_sorts([5, -3, 0, 12, 7, -40], capsys.readouterr().out)


def test_two_sorted_values_are_swapped_and_rotated(capsys):
    assert main(["1 2"]) == 0
    assert capsys.readouterr().out == "sa\nra\n"


def test_sorted_arguments_print_nothing(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


def test_extreme_values_are_accepted(capsys):
    assert main(["2147483647", "-2147483648", "0"]) == 0
    _assert_sorts([2147483647, -2147483648, 0], capsys.readouterr().out)


@pytest.mark.parametrize(
    "argv",
    [
        ["1", "1"],
        ["1 2 1"],
        ["2147483648"],
        ["-2147483649", "3"],
        ["1\t2"],
        ["1", "a"],
        ["1", ""],
        ["-", "2"],
        ["3", "4+"],
    ],
)
def test_bad_input_reports_error(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""