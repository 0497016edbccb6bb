#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Log import Log
from .ObjUtil import ObjUtil

log = Log.get("classface.registry")


class ReadyEntry:
    """A class paired with the `__ready__` callback it declared"""

    __slots__ = ('clazz', 'callback')

    def __init__(self, clazz, callback):
        self.clazz = clazz
        self.callback = callback

    def __repr__(self):
        return f"ReadyEntry({_name(self.clazz)})"


class ReadyRegistry:
    """Classes that asked to observe their own derivation.

    Entries are kept in declaration order and scanned on every declaration.
    The registry only grows unless entries are evicted or cleared.
    """

    def __init__(self):
        self._entries = []

    def notify(self, clazz, parents, api):
        """Built-in `__ready__` plugin.

        Tell every registered ancestor in parents that clazz derives from it,
        then register clazz's own callback, which is first called on clazz.
        """
        parents = parents or ()
        for entry in list(self._entries):
            if any(p is entry.clazz for p in parents):
                log.debug(f"ready: {_name(entry.clazz)} <- {_name(clazz)}")
                entry.callback(entry.clazz, clazz, api, parents)

        ready = ObjUtil.members(api).get("__ready__")
        if callable(ready):
            ready(clazz, clazz, api, parents)
            self._entries.append(ReadyEntry(clazz, ready))

    def entries(self):
        return list(self._entries)

    def evict(self, clazz):
        """Drop the entries of clazz; return how many were removed"""
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.clazz is not clazz]
        return before - len(self._entries)

    def clear(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)


def _name(clazz):
    return getattr(clazz, "__name__", type(clazz).__name__)
