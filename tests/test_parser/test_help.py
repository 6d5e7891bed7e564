from io import StringIO

import pytest
from rich.console import Console

from optgrid.parser import VARIADIC, OptionDescriptor, build_registry, print_help
from optgrid.parser.help import render_all, render_one, signature_column


@pytest.fixture
def registry():
    return build_registry(
        [
            OptionDescriptor(short="v", long="verbose", description="Prints verbose messages"),
            OptionDescriptor(
                short="a",
                long="add",
                arity=2,
                hints=("<money>", "<item>"),
                description="Adds an expense record",
                group="Records",
            ),
            OptionDescriptor(
                long="tag",
                arity=VARIADIC,
                hints="<tag>",
                description="Tags the record",
                group="Records",
            ),
        ],
        "1.0.0",
    )


@pytest.fixture
def buffer_console():
    return Console(file=StringIO(), width=80, color_system=None, force_terminal=False)


def test_signature_column(registry):
    assert registry.indent == 24
    assert signature_column(registry, 80) == 30
    assert signature_column(registry, 40) == 20


def test_width_too_small(registry):
    with pytest.raises(ValueError):
        render_all(registry, 9)


def test_render_one(registry):
    assert render_one(registry, "v", 80) == f"{'  -v, --verbose':<30}Prints verbose messages\n"
    assert render_one(registry, "--verbose", 80) == render_one(registry, "-v", 80)


def test_render_one_wraps_both_columns(registry):
    expected = (
        f"{'  -a, --add':<20}Adds an expense \n"
        f"{'  <money> <item>':<20}record\n"
    )
    assert render_one(registry, "add", 40) == expected


def test_render_one_unknown(registry):
    assert render_one(registry, "nope", 80) is None
    assert render_one(registry, "--v", 80) is None


def test_render_all(registry):
    expected = (
        "Options:\n"
        f"{'  -v, --verbose':<30}Prints verbose messages\n"
        "\n"
        "Records:\n"
        f"{'  -a, --add <money> <item>':<30}Adds an expense record\n"
        f"{'  --tag <tag> [<tag> ...]':<30}Tags the record\n"
        "\n"
    )
    assert render_all(registry, 80) == expected


def test_render_all_lines_fit_width(registry):
    for width in (12, 20, 33, 80):
        for line in render_all(registry, width).splitlines():
            assert len(line.rstrip()) <= width


def test_print_help(registry, buffer_console):
    assert print_help(registry, console=buffer_console) is True
    output = buffer_console.file.getvalue()
    assert "Options:" in output
    assert "Records:" in output
    assert "Tags the record" in output


def test_print_help_one_option(registry, buffer_console):
    assert print_help(registry, width=80, identifier="tag", console=buffer_console)
    output = buffer_console.file.getvalue()
    assert "--tag <tag> [<tag> ...]" in output
    assert "Options:" not in output


def test_print_help_unknown_option(registry, buffer_console):
    assert print_help(registry, identifier="nope", console=buffer_console) is False
    assert buffer_console.file.getvalue() == ""


def test_render_all_lists_each_group_once_in_first_seen_order():
    labels = ["A", "B", "A", "C"]
    registry = build_registry(
        [
            OptionDescriptor(long=f"opt{i}", description=f"option {i}", group=label)
            for i, label in enumerate(labels)
        ],
        "1.0.0",
    )
    lines = render_all(registry, 80).splitlines()
    headers = [line for line in lines if line.endswith(":") and not line.startswith(" ")]
    assert headers == ["A:", "B:", "C:"]
    group_a = lines[lines.index("A:") : lines.index("B:")]
    assert any("--opt0" in line for line in group_a)
    assert any("--opt2" in line for line in group_a)
