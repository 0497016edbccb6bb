#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from contextvars import ContextVar
from functools import wraps

from .Log import Log
from .ObjUtil import ObjUtil

log = Log.get("classface")

# Innermost member call running in this context:
#   (receiver, dispatcher, declared name, function running)
_active = ContextVar("classface_super", default=None)


class Dispatcher:
    """Late-bound super-call resolver installed on a class as `super_`.

    Resolution happens on every call, from the declared name of the member
    that is running: a constructor resolves to the first parent's
    constructor, any other method to the same-named member of the last
    parent defining it.
    """

    def __init__(self, clazz, parents):
        self._clazz = clazz
        self._parents = tuple(parents or ())

    def owner(self):
        return self._clazz

    def parents(self):
        return self._parents

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        return BoundSuper(obj)

    def dispatch(self, receiver, name, running, args, kwargs):
        """Resolve and invoke the ancestor implementation of member name for receiver"""
        dispatcher = self
        while dispatcher is not None:
            func, next_dispatcher = dispatcher._resolve(name)
            if func is None:
                if log.is_debug():
                    log.debug(f"super from {name} on {dispatcher._clazz.__name__}: no ancestor")
                return None
            if func is running:
                # inherited copy of the caller itself, keep climbing from its owner
                dispatcher = next_dispatcher
                continue
            return _invoke(receiver, func, next_dispatcher, name, args, kwargs)
        return None

    def _resolve(self, name):
        """Find (function, its dispatcher) for member name, or Nones"""
        parents = self._parents

        if name == "__init__":
            # only the closest parent is consulted for constructors
            head = parents[0] if parents else None
            if ObjUtil.is_class(head):
                return head.__init__, dispatcher_of(head)
            return None, None

        # most right parent first
        for parent in reversed(parents):
            table = ObjUtil.prototype(parent) if ObjUtil.is_class(parent) else ObjUtil.members(parent)
            if name in table:
                func = table[name]
                if not ObjUtil.is_function(func):
                    return None, None
                return func, dispatcher_of(parent)
        return None, None

    def __repr__(self):
        return f"Dispatcher({self._clazz.__name__})"


class BoundSuper:
    """Super call bound to one receiver, called as `self.super_(*args)`"""

    __slots__ = ('_receiver',)

    def __init__(self, receiver):
        self._receiver = receiver

    def __call__(self, *args, **kwargs):
        entry = _active.get()
        if entry is None or entry[0] is not self._receiver:
            log.debug("super called outside a member of its receiver")
            return None
        _, dispatcher, name, running = entry
        if dispatcher is None:
            return None
        return dispatcher.dispatch(self._receiver, name, running, args, kwargs)


def member(owner, name, fn):
    """Wrap function fn stored as member name of class owner.

    While fn runs, the wrapper records which member is running so a
    `super_` call from its body resolves against name, whatever fn's code.
    """
    @wraps(fn)
    def run(*args, **kwargs):
        receiver = args[0] if args else None
        token = _active.set((receiver, dispatcher_of(owner), name, fn))
        try:
            return fn(*args, **kwargs)
        finally:
            _active.reset(token)

    return run


def dispatcher_of(parent):
    """Dispatcher of a class, or of an object's class; None for singletons"""
    clazz = parent if ObjUtil.is_class(parent) else type(parent)
    d = vars(clazz).get("super_")
    return d if isinstance(d, Dispatcher) else None


def make_super(child, parents):
    """Install the super dispatcher of child over its parent list"""
    dispatcher = Dispatcher(child, parents)
    child.super_ = dispatcher
    return dispatcher


def _invoke(receiver, func, dispatcher, name, args, kwargs):
    token = _active.set((receiver, dispatcher, name, func))
    try:
        return ObjUtil.bind(func, receiver)(*args, **kwargs)
    finally:
        _active.reset(token)
