import importlib
import sys

import pytest

import skybomber


def test_core_imports_without_pygame(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "skybomber.pygame", None)
    try:
        reloaded = importlib.reload(skybomber)

        assert reloaded.PygameSkyBomber is None
        assert reloaded.GameSession is not None
        with pytest.raises(RuntimeError, match=r"skybomber\[gui\]"):
            reloaded.run_pygame()
    finally:
        monkeypatch.undo()
        importlib.reload(skybomber)
