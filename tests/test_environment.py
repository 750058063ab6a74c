import pytest
from environment import Environment
from errors import BitOpsError, UndefinedVariableError


def test_assign_and_lookup():
    env = Environment()
    env.assign("a", 5)
    env.assign("a", -3)
    assert env.lookup("a") == -3
    assert "a" in env
    assert len(env) == 1


def test_lookup_before_assignment_raises():
    env = Environment()
    with pytest.raises(UndefinedVariableError) as exc:
        env.lookup("missing")
    assert exc.value.name == "missing"
    assert isinstance(exc.value, BitOpsError)
    assert not env.exists("missing")


def test_snapshot_is_a_copy():
    env = Environment()
    env.assign("x", 1)
    snap = env.snapshot()
    snap["x"] = 99
    assert env.lookup("x") == 1


def test_clear_forgets_everything():
    env = Environment()
    env.assign("x", 1)
    env.clear()
    assert len(env) == 0
    with pytest.raises(UndefinedVariableError):
        env.lookup("x")
