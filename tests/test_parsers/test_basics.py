import pytest

from argtap.exceptions import (
    ArgumentCountMismatchError,
    ConstraintError,
    InvalidValueError,
    LogicError,
    MissingValueError,
    UnexpectedValueError,
    UnknownArgumentError,
)
from argtap.parser import (
    Argument,
    ArgumentParser,
    ArgumentSet,
    MultiValueArgument,
    ValueArgument,
)


@pytest.mark.parametrize("tokens", [["--beta=value"], ["--beta", "value"]])
def test_named_value_forms(tokens):
    beta = ValueArgument("Beta option", name="beta")
    parser = ArgumentParser(beta)

    parser.parse_args(tokens)

    assert beta.value == "value"
    assert beta.count == 1


def test_named_value_keeps_later_delimiters():
    beta = ValueArgument("Beta option", name="beta")
    ArgumentParser(beta).parse_args(["--beta=key=value"])
    assert beta.value == "key=value"


def test_named_empty_inline_value():
    beta = ValueArgument("Beta option", name="beta")
    ArgumentParser(beta).parse_args(["--beta="])
    assert beta.value == ""


def test_named_missing_value():
    beta = ValueArgument("Beta option", name="beta")
    parser = ArgumentParser(beta)

    with pytest.raises(MissingValueError, match="Argument --beta value requires a value"):
        parser.parse_args(["--beta"])


def test_named_unexpected_value():
    alpha = Argument("Alpha option", name="alpha")
    parser = ArgumentParser(alpha)

    with pytest.raises(UnexpectedValueError) as excinfo:
        parser.parse_args(["--alpha=1"])

    assert str(excinfo.value) == "Argument --alpha does not accept a value"
    assert alpha.count == 0


def test_named_flag_argument():
    alpha = Argument("Alpha option", "a", "alpha")
    ArgumentParser(alpha).parse_args(["--alpha"])
    assert alpha.count == 1


def test_unknown_name():
    parser = ArgumentParser(Argument("Alpha option", name="alpha"))

    with pytest.raises(UnknownArgumentError) as excinfo:
        parser.parse_args(["--gamma=1"])

    assert excinfo.value.name == "gamma"
    assert str(excinfo.value) == "The named argument --gamma is unknown"


def test_skip_marker_forces_positional():
    a = Argument("Alpha option", "a")
    p = ValueArgument("Positional")
    parser = ArgumentParser(a, p)

    parser.parse_args(["-a", "--", "-a"])

    assert a.count == 1
    assert p.value == "-a"


def test_tokens_after_skip_marker_are_all_positional():
    p = MultiValueArgument("Positional")
    parser = ArgumentParser(p)

    parser.parse_args(["--", "x", "--", "--name=1"])

    assert p.value == ["x", "--", "--name=1"]


def test_lone_flag_prefix_is_positional():
    p = ValueArgument("Positional")
    ArgumentParser(p).parse_args(["-"])
    assert p.value == "-"


def test_no_positional_arguments_declared():
    parser = ArgumentParser(Argument("Alpha option", "a"))

    with pytest.raises(UnknownArgumentError, match="No positional arguments are supported"):
        parser.parse_args(["stray"])


def test_invalid_value_through_parser():
    count = ValueArgument("Count", name="count", type=int)
    parser = ArgumentParser(count)

    with pytest.raises(InvalidValueError) as excinfo:
        parser.parse_args(["--count", "abc"])

    assert str(excinfo.value) == "Argument --count value does not accept the value abc"


def test_required_argument_missing():
    parser = ArgumentParser(Argument("Alpha option", "a", required=True))

    with pytest.raises(ArgumentCountMismatchError, match="Argument -a is required"):
        parser.parse_args([])


def test_repeated_argument_overflow():
    parser = ArgumentParser(Argument("Alpha option", "a"))

    with pytest.raises(ArgumentCountMismatchError, match="can only be set once"):
        parser.parse_args(["-a", "-a"])


def test_constraints_checked_after_sets():
    a = Argument("Alpha option", "a")
    b = Argument("Beta option", "b")
    parser = ArgumentParser(a, b)
    parser.add_constraint(a ^ b)

    with pytest.raises(ConstraintError):
        parser.parse_args([])

    with pytest.raises(ConstraintError):
        ArgumentParser(a, b).add_constraint(a ^ b).parse_args(["-a", "-b"])


def test_constraints_pass():
    a = Argument("Alpha option", "a")
    b = Argument("Beta option", "b")
    parser = ArgumentParser(a, b).add_constraint(a ^ b)

    parser.parse_args(["-b"])

    assert (a.count, b.count) == (0, 1)


def test_resolution_prefers_settable_match():
    first = Argument("First", "x")
    second = Argument("Second", "x")
    parser = ArgumentParser(first, second)

    parser.parse_args(["-x", "-x"])

    assert (first.count, second.count) == (1, 1)


def test_resolution_falls_back_to_last_match():
    first = Argument("First", "x")
    second = Argument("Second", "x")
    parser = ArgumentParser(first, second)

    with pytest.raises(ArgumentCountMismatchError) as excinfo:
        parser.parse_args(["-x", "-x", "-x"])

    assert (first.count, second.count) == (1, 2)
    assert excinfo.value.argument.occurrences is second.occurrences


def test_state_is_not_rolled_back_on_error():
    a = Argument("Alpha option", "a")
    parser = ArgumentParser(a)

    with pytest.raises(UnknownArgumentError):
        parser.parse_args(["-a", "-z"])

    assert a.count == 1


def test_parse_takes_program_name_from_argv():
    a = Argument("Alpha option", "a")
    parser = ArgumentParser(a)

    parser.parse(["prog", "-a"])

    assert parser.program_name == "prog"
    assert a.count == 1


def test_parse_keeps_preset_program_name():
    parser = ArgumentParser(Argument("Alpha option", "a"), program_name="tool")
    parser.parse(["ignored"])
    assert parser.program_name == "tool"


def test_parse_requires_program_name():
    with pytest.raises(LogicError):
        ArgumentParser().parse([])


def test_parse_defaults_to_sys_argv(monkeypatch):
    a = Argument("Alpha option", "a")
    monkeypatch.setattr("sys.argv", ["from-sys", "-a"])

    ArgumentParser(a).parse()

    assert a.count == 1


def test_lookup_by_flag_or_name():
    alpha = Argument("Alpha option", "a", "alpha")
    parser = ArgumentParser(alpha)

    for key in ("a", "-a", "alpha", "--alpha"):
        assert parser[key].occurrences is alpha.occurrences

    with pytest.raises(KeyError):
        parser["zulu"]


def test_add_and_add_all():
    a = Argument("Alpha option", "a")
    b = Argument("Beta option", "b")
    c = Argument("Charlie option", "c")
    parser = ArgumentParser(a).add(b).add_all(c)

    parser.parse_args(["-abc"])

    assert len(parser.argument_sets) == 1
    assert len(parser.argument_sets[0]) == 3
    assert (a.count, b.count, c.count) == (1, 1, 1)


def test_add_argument_set_appends_group():
    a = Argument("Alpha option", "a")
    o = ValueArgument("Output", "o")
    parser = ArgumentParser(a).add(ArgumentSet("Output", o))

    parser.parse_args(["-o", "out.txt"])

    assert [s.name for s in parser.argument_sets] == ["Arguments", "Output"]
    assert o.value == "out.txt"


def test_argument_in_several_sets_shares_state():
    a = Argument("Alpha option", "a")
    parser = ArgumentParser(a).add(ArgumentSet("Again", a))

    parser.parse_args(["-a"])

    assert a.count == 1
    for argument_set in parser.argument_sets:
        assert argument_set.args()[0].count == 1


def test_parser_str():
    parser = ArgumentParser(Argument("Alpha option", "a"), program_name="tool")
    assert str(parser) == (
        "ArgumentParser(program='tool', sets=1, arguments=1, constraints=0)"
    )
