"""Tests for tabletool.environment."""

from tabletool.environment import Environment
from tabletool.values import Nil, VNumber


def test_declare_local_defaults_to_nil():
    env = Environment()
    env.declare_local("t")
    assert "t" in env.locals_
    assert env.lookup("t") is Nil

def test_assign_updates_declared_local():
    env = Environment()
    env.declare_local("t")
    env.assign("t", VNumber(1))
    assert env.locals_["t"] == VNumber(1)
    assert env.globals_ == {}

def test_assign_undeclared_goes_global():
    env = Environment()
    env.assign("g", VNumber(2))
    assert env.globals_["g"] == VNumber(2)
    assert env.lookup("g") == VNumber(2)

def test_lookup_missing():
    assert Environment().lookup("nope") is Nil
