import sys

import pytest

from optgrid.exceptions import DeclarationError, LifecycleError, UsageError
from optgrid.parser import OptionDescriptor, OptionEngine

OPTIONS = [
    OptionDescriptor(short="v", long="verbose", description="Prints verbose messages"),
    OptionDescriptor(short="o", long="output", arity=1, hints="<file>", description="Output"),
]


@pytest.fixture
def engine():
    engine = OptionEngine()
    engine.setup(OPTIONS, version="1.0.0")
    return engine


def test_full_lifecycle(engine):
    classification = engine.classify(["prog", "-v", "--output", "out.txt"])
    assert engine.classification is classification
    assert engine.bool_flags == (0,)
    assert engine.value_flags == (1,)
    assert engine.positionals == ("out.txt",)
    assert engine.has("--verbose")
    assert engine.has("o")
    assert not engine.has("--missing")
    engine.teardown()


def test_classify_defaults_to_sys_argv(engine, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "-v", "file"])
    engine.classify()
    assert engine.bool_flags == (0,)
    assert engine.positionals == ("file",)


def test_setup_twice():
    engine = OptionEngine()
    engine.setup(OPTIONS, version="1.0.0")
    with pytest.raises(LifecycleError):
        engine.setup(OPTIONS, version="1.0.0")


def test_failed_setup_leaves_engine_unset():
    engine = OptionEngine()
    with pytest.raises(DeclarationError):
        engine.setup([], version="1.0.0")
    engine.setup(OPTIONS, version="1.0.0")
    assert engine.registry.size == 2


def test_classify_before_setup():
    engine = OptionEngine()
    with pytest.raises(LifecycleError):
        engine.classify(["prog"])


def test_classify_twice(engine):
    engine.classify(["prog"])
    with pytest.raises(LifecycleError):
        engine.classify(["prog"])


def test_results_before_classify(engine):
    with pytest.raises(LifecycleError):
        engine.positionals


def test_usage_error_propagates(engine):
    with pytest.raises(UsageError):
        engine.classify(["prog", "--nope"])


def test_render_through_engine(engine):
    assert engine.render_all(80).startswith("Options:\n")
    assert "--output <file>" in engine.render_one("output", 80)
    assert engine.render_one("nope", 80) is None


def test_teardown_closes_engine(engine):
    engine.classify(["prog"])
    engine.teardown()
    with pytest.raises(LifecycleError):
        engine.registry
    with pytest.raises(LifecycleError):
        engine.setup(OPTIONS, version="1.0.0")
    with pytest.raises(LifecycleError):
        engine.teardown()


def test_lifecycle_error_is_usage_error():
    assert issubclass(LifecycleError, UsageError)
