#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Err import ArgErr
from .Extend import extend
from .Log import Log
from .Obj import Obj
from .ObjUtil import ObjUtil
from .Prototype import Prototype
from .Registry import ReadyRegistry
from .Super import make_super, member

log = Log.get("classface.class")


class ClassFactory:
    """Builds classes and singletons from a parent list and an API map.

    Usage:
        Animal = Class({"__init__": init, "speak": speak})
        Dog = Class(Animal, {"speak": bark, "__statics__": {"kind": "dog"}})
        Config = Class({"__singleton__": True, "debug": False})

    Reserved API keys:
        __init__        constructor, never inherited
        __name__        name of the produced class
        __singleton__   produce a ready-made instance instead of a class
        __statics__     map of class-level members, applied last
        plugin names    such as __ready__, consumed by the plugins
    """

    RESERVED = ("__init__", "__name__", "__singleton__", "__statics__", "prototype", "super_")

    def __init__(self, registry=None, overload=None):
        self.registry = registry if registry is not None else ReadyRegistry()
        # optional fn(name, ctor) -> ctor accepting several call signatures
        self.overload = overload
        self.plugins = {"__ready__": self.registry.notify}

    def __call__(self, parents=None, api=None):
        if api is None:
            parents, api = None, parents
        if api is None:
            api = {}

        if parents is None:
            parents = []
        elif ObjUtil.is_array(parents):
            parents = list(parents)
        else:
            parents = [parents]

        # an api function computes the map at declaration time
        if ObjUtil.is_function(api) and not ObjUtil.is_class(api):
            api = api()
        if not ObjUtil.is_map(api):
            raise ArgErr.make("Invalid params")

        table = ObjUtil.members(api)
        constructor = table.get("__init__")
        singleton = table.get("__singleton__")
        statics = table.get("__statics__")

        ignored = dict.fromkeys(self.RESERVED, True)
        ignored.update(dict.fromkeys(self.plugins, True))

        name = table.get("__name__") or ("Singleton" if singleton else "Class")
        if singleton:
            clazz = _define(name, None, parents)
            clazz.__singleton__ = True
            product = clazz()
        else:
            product = clazz = _define(name, self._constructor(constructor), parents)

        for p in parents:
            extend(product, p, ignored)
        extend(product if singleton else clazz.prototype, api, ignored)
        extend(product, statics, ignored)

        if not singleton:
            make_super(clazz, parents)

        log.debug(f"defined {name} from {len(parents)} parent(s)")
        for fn in list(self.plugins.values()):
            fn(product, parents, api)
        return product

    def _constructor(self, constructor):
        if constructor is None:
            return None
        if self.overload is not None:
            return self.overload("__init__", constructor)
        return constructor


def _define(name, ctor, parents):
    """Create the bare class object with its member tables"""
    if ctor is None:
        def ctor(self, *args, **kwargs):
            pass
    clazz = type(name, (Obj,), {})
    clazz.__init__ = member(clazz, "__init__", ctor)
    clazz.prototype = Prototype(clazz)
    clazz.__statics__ = {}
    clazz.__parents__ = tuple(parents)
    return clazz


# Default factory
Class = ClassFactory()
