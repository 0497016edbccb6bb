#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
from collections.abc import MutableMapping

from .Super import member


class Prototype(MutableMapping):
    """Instance-scope member table of a class built by a ClassFactory.

    The table answers members exactly as they were declared, in definition
    order. Each is also stored as an attribute of the class so instances
    resolve it through normal attribute lookup; plain functions are stored
    wrapped so the running member knows the name it was declared under.
    """

    def __init__(self, clazz):
        self._clazz = clazz
        self._members = {}

    def owner(self):
        """Get the class this table belongs to"""
        return self._clazz

    def __getitem__(self, key):
        return self._members[key]

    def __setitem__(self, key, value):
        self._members[key] = value
        if inspect.isfunction(value):
            value = member(self._clazz, key, value)
        setattr(self._clazz, key, value)

    def __delitem__(self, key):
        del self._members[key]
        if key in vars(self._clazz):
            delattr(self._clazz, key)

    def __iter__(self):
        return iter(list(self._members))

    def __len__(self):
        return len(self._members)

    def __repr__(self):
        return f"Prototype({self._clazz.__name__}: {', '.join(self._members)})"
