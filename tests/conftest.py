import logging
from io import StringIO

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def consoles(monkeypatch):
    out = Console(file=StringIO(), width=200, color_system=None, force_terminal=False)
    err = Console(file=StringIO(), width=200, color_system=None, force_terminal=False)
    monkeypatch.setattr("optgrid.__main__.console", out)
    monkeypatch.setattr("optgrid.__main__.err_console", err)
    monkeypatch.setattr("optgrid.parser.help.default_console", out)
    monkeypatch.setattr("optgrid.init.console", out)
    return out, err
