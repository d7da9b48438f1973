import pytest

from argtap.exceptions import ArgumentCountMismatchError, LogicError
from argtap.parser import Argument, ValueArgument


def test_argument_default_bounds():
    """A fresh argument may occur exactly once."""
    arg = Argument("Alpha option", "a", "alpha")
    assert arg.min == 1
    assert arg.max == 1
    assert arg.count == 0
    assert arg.can_set()

    arg.set()

    assert arg.count == 1
    assert not arg.can_set()
    arg.check_valid()


def test_argument_forced_overflow_fails_validation():
    arg = Argument("Alpha option", "a")
    arg.set()
    arg.set()

    with pytest.raises(ArgumentCountMismatchError) as excinfo:
        arg.check_valid()

    assert str(excinfo.value) == "Argument -a can only be set once"
    assert excinfo.value.count == 2
    assert excinfo.value.expected == 1
    assert excinfo.value.argument is arg


def test_argument_optional_unset_is_valid():
    Argument("Alpha option", "a").check_valid()


def test_argument_required_unset_fails():
    arg = Argument("Alpha option", "a", required=True)

    with pytest.raises(ArgumentCountMismatchError, match="Argument -a is required"):
        arg.check_valid()


def test_argument_minimum_occurrences():
    arg = Argument("Alpha option", "a").set_min(2)
    assert arg.max == 2

    arg.set()
    with pytest.raises(ArgumentCountMismatchError) as excinfo:
        arg.check_valid()
    assert str(excinfo.value) == "Argument -a is required to occur at least 2 times"

    arg.set()
    arg.check_valid()


def test_argument_maximum_occurrences():
    arg = Argument("Alpha option", "a").set_max(3)
    for _ in range(4):
        arg.set()

    with pytest.raises(ArgumentCountMismatchError) as excinfo:
        arg.check_valid()
    assert str(excinfo.value) == "Argument -a can occur at most 3 times"


@pytest.mark.parametrize("minimum", [0, -1])
def test_argument_rejects_non_positive_minimum(minimum):
    with pytest.raises(LogicError, match="Cannot set zero minimum"):
        Argument("Alpha option", "a").set_min(minimum)


def test_argument_lowering_max_lowers_min():
    arg = Argument("Alpha option", "a").set_min(3)
    assert (arg.min, arg.max) == (3, 3)

    arg.set_max(2)
    assert (arg.min, arg.max) == (2, 2)


def test_argument_unbounded_max_keeps_min():
    arg = Argument("Alpha option", "a").set_max(0).set_min(5)
    assert (arg.min, arg.max) == (5, 0)


def test_argument_many():
    arg = Argument("Alpha option", "a").many()
    assert arg.max == 0
    for _ in range(5):
        arg.set()
    assert arg.can_set()
    arg.check_valid()

    arg.many(False)
    assert arg.max == 1


def test_argument_many_false_keeps_larger_bound():
    arg = Argument("Alpha option", "a").set_max(4).many(False)
    assert arg.max == 4


def test_positional_argument_must_take_a_value():
    with pytest.raises(LogicError):
        Argument("No aliases at all")


def test_argument_alias_and_matches():
    arg = Argument("Alpha option", "a").alias(flag="b", name="bravo")

    assert arg.flags == ("a", "b")
    assert arg.names == ("bravo",)
    assert arg.matches(flag="a")
    assert arg.matches(flag="b")
    assert arg.matches(name="bravo")
    assert not arg.matches(name="alpha")
    assert not arg.matches()
    assert not arg.positional


def test_argument_usage_and_ident():
    both = Argument("Alpha option", "a", "alpha")
    assert both.usage() == "-a"
    assert both.ident() == "-a, --alpha"

    name_only = Argument("Alpha option", name="alpha")
    assert name_only.usage() == "--alpha"
    assert name_only.ident() == "--alpha"


@pytest.mark.parametrize("flag, name", [("ab", None), ("", None), (None, "")])
def test_argument_rejects_malformed_aliases(flag, name):
    with pytest.raises(LogicError):
        Argument("Alpha option", flag, name)


def test_positional_status_is_fixed_at_construction():
    arg = ValueArgument("Input file")
    arg.alias(flag="i")

    assert arg.positional
    assert arg.matches()
    assert arg.matches(flag="i")


def test_argument_clone_shares_count_not_aliases():
    arg = Argument("Alpha option", "a")
    clone = arg.clone()

    clone.set()
    clone.alias(flag="z")

    assert clone is not arg
    assert arg.count == 1
    assert arg.occurrences is clone.occurrences
    assert not arg.matches(flag="z")


def test_argument_check_callback_runs_after_increment():
    seen = []
    arg = Argument("Alpha option", "a").set_max(2)
    arg.check(lambda argument: seen.append(argument.count))

    arg.set()
    arg.set()

    assert seen == [1, 2]


def test_argument_check_callback_errors_propagate():
    def reject(argument):
        raise ValueError("not today")

    arg = Argument("Alpha option", "a").check(reject)

    with pytest.raises(ValueError, match="not today"):
        arg.set()
    assert arg.count == 1


def test_plain_argument_rejects_values():
    with pytest.raises(LogicError):
        Argument("Alpha option", "a").set_value("1")
    assert not Argument("Alpha option", "a").takes_value()


def test_argument_truthiness_follows_count():
    arg = Argument("Alpha option", "a")
    assert not arg
    arg.set()
    assert arg


def test_argument_required_operators():
    arg = Argument("Alpha option", "a")

    assert (+arg) is arg
    assert arg.required

    assert (-arg) is arg
    assert not arg.required


def test_argument_many_false_keeps_minimum_reachable():
    arg = Argument("Alpha option", "a").set_min(3).many().many(False)
    assert (arg.min, arg.max) == (3, 3)
    for _ in range(3):
        arg.set()
    arg.check_valid()
