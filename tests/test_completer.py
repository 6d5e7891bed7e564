import pytest
from prompt_toolkit.document import Document

from optgrid.completer import OptionCompleter
from optgrid.parser import OptionDescriptor, build_registry


@pytest.fixture
def completer():
    registry = build_registry(
        [
            OptionDescriptor(short="v", long="verbose", description="Verbose"),
            OptionDescriptor(long="version", description="Version"),
            OptionDescriptor(short="o", long="output", arity=1, hints="<f>", description="Out"),
            OptionDescriptor(keyword="push", description="Push"),
            OptionDescriptor(keyword="pull", description="Pull"),
        ],
        "1.0.0",
    )
    return OptionCompleter(registry)


def completions(completer, text):
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_suggest_long(completer):
    assert completer.suggest("--ver") == ["--verbose", "--version"]


def test_suggest_single_dash(completer):
    assert completer.suggest("-") == ["--output", "--verbose", "--version", "-o", "-v"]


def test_suggest_keywords(completer):
    assert completer.suggest("pu") == ["pull", "push"]
    assert completer.suggest("x") == []


def test_suggest_empty_stub(completer):
    assert completer.suggest("") == [
        "--output",
        "--verbose",
        "--version",
        "-o",
        "-v",
        "pull",
        "push",
    ]


def test_single_match_completes_fully(completer):
    result = list(completer.get_completions(Document("--out"), None))
    assert [c.text for c in result] == ["--output"]
    assert result[0].start_position == -5


def test_multiple_flag_matches(completer):
    assert completions(completer, "-v --ver") == ["--verbose", "--version"]


def test_keyword_common_prefix(completer):
    assert completions(completer, "p") == ["pu", "pull", "push"]


def test_after_space_offers_everything(completer):
    assert len(completions(completer, "push ")) == 7


def test_unbalanced_quote(completer):
    assert completions(completer, 'push "unterminated') == []
