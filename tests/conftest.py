#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import pytest

from classface import ClassFactory, Env, ReadyRegistry


@pytest.fixture
def factory():
    """A factory with its own ready registry, isolated from the default Class"""
    return ClassFactory(ReadyRegistry())


@pytest.fixture
def env():
    """Swap in a fresh Env for the test and restore the previous one after"""
    def install(vars):
        e = Env(vars)
        Env.set_cur(e)
        return e
    old = Env.set_cur(None)
    yield install
    Env.set_cur(old)
