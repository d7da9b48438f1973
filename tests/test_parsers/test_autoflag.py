import pytest

from argtap.exceptions import LogicError
from argtap.parser import Argument, ArgumentParser, ValueArgument
from argtap.parser.utils import parse_description


@pytest.mark.parametrize(
    "description, expected",
    [
        ("Show this &help text", ("Show this help text", ["h"], ["help"])),
        ("%verbose output", ("verbose output", ["v"], [])),
        ("Write to $output file", ("Write to output file", [], ["output"])),
        ("Costs 100\\% more", ("Costs 100% more", [], [])),
        ("Trailing % marker", ("Trailing  marker", [], [])),
        ("&dry-run mode", ("dry-run mode", ["d"], ["dry"])),
        ("Use %gzip or $xz", ("Use gzip or xz", ["g"], ["xz"])),
        ("No markers here", ("No markers here", [], [])),
    ],
)
def test_parse_description(description, expected):
    assert parse_description(description) == expected


def test_autoflag_argument():
    arg = Argument("Show this &help text", autoflag=True)

    assert arg.flags == ("h",)
    assert arg.names == ("help",)
    assert arg.description == "Show this help text"
    assert not arg.positional


def test_autoflag_combines_with_explicit_aliases():
    arg = Argument("%quiet mode", "x", autoflag=True)
    assert arg.flags == ("q", "x")


def test_autoflag_disabled_keeps_markers():
    arg = Argument("Show this &help text", "h")
    assert arg.description == "Show this &help text"
    assert arg.names == ()


def test_autoflag_typed_argument():
    level = ValueArgument("Set optimization &level", autoflag=True, type=int)

    ArgumentParser(level).parse_args(["--level=2"])

    assert level.usage() == "-l value"
    assert level.value == 2


def test_autoflag_without_markers_is_positional():
    with pytest.raises(LogicError):
        Argument("No markers at all", autoflag=True)
