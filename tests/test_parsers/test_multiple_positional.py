import pytest

from argtap.exceptions import ArgumentCountMismatchError
from argtap.parser import Argument, ArgumentParser, MultiValueArgument, ValueArgument


def test_unbounded_first_positional_absorbs_everything():
    p1 = MultiValueArgument("First").set_value_name("p1")
    p2 = MultiValueArgument("Second").set_value_name("p2")
    parser = ArgumentParser(p1, p2)

    parser.parse_args(["x", "y", "z"])

    assert p1.value == ["x", "y", "z"]
    assert p2.count == 0
    assert p2.value == []


def test_bounded_first_positional_overflows_to_second():
    p1 = MultiValueArgument("First").set_max(2)
    p2 = MultiValueArgument("Second")
    parser = ArgumentParser(p1, p2)

    parser.parse_args(["x", "y", "z"])

    assert p1.value == ["x", "y"]
    assert p2.value == ["z"]


def test_positional_count_range():
    """Single-value positionals keep the last value of each occurrence."""
    p1 = ValueArgument("First").set_max(2)
    p2 = ValueArgument("Second").set_max(2)
    parser = ArgumentParser(p1, p2)

    parser.parse_args(["a", "b", "c", "d"])

    assert (p1.count, p1.value) == (2, "b")
    assert (p2.count, p2.value) == (2, "d")


def test_positional_many():
    p1 = ValueArgument("First")
    p2 = ValueArgument("Second").many()
    parser = ArgumentParser(p1, p2)

    parser.parse_args(["a", "b", "c", "d"])

    assert p1.value == "a"
    assert (p2.count, p2.value) == (3, "d")


def test_positional_overflow_reported_by_validation():
    p1 = ValueArgument("First").set_value_name("file")
    parser = ArgumentParser(p1)

    with pytest.raises(ArgumentCountMismatchError) as excinfo:
        parser.parse_args(["a", "b"])

    assert str(excinfo.value) == "Argument file can only be set once"
    assert p1.value == "b"


def test_positionals_interleaved_with_flags():
    files = MultiValueArgument("Files")
    verbose = Argument("Verbose", "v")
    parser = ArgumentParser(files, verbose)

    parser.parse_args(["x", "-v", "y"])

    assert files.value == ["x", "y"]
    assert verbose.count == 1


def test_positional_typed_values():
    numbers = MultiValueArgument("Numbers", type=int)
    ArgumentParser(numbers).parse_args(["1", "2", "3"])
    assert numbers.value == [1, 2, 3]


def test_positional_with_flag_alias():
    target = ValueArgument("Target").alias(flag="t")
    parser = ArgumentParser(target)

    parser.parse_args(["-t", "here"])

    assert target.value == "here"
