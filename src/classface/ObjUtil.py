#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
from collections.abc import Mapping, Sequence


class _Stop:
    """Returned from an each() callback to end the iteration"""

    def __repr__(self):
        return "STOP"


STOP = _Stop()


class ObjUtil:
    """Value classification, member tables and traversal"""

    #########################################################################
    # Type predicates
    #########################################################################

    @staticmethod
    def is_map(obj):
        """Check an object is a map: a mapping or a constructed object.

        Classes are never maps, they expose their statics as a function does.
        """
        if isinstance(obj, Mapping):
            return True
        from .Obj import Obj
        return isinstance(obj, Obj)

    @staticmethod
    def is_array(obj):
        """Check an object is an ordered sequence (text excluded)"""
        return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))

    @staticmethod
    def is_function(obj):
        if isinstance(obj, (staticmethod, classmethod)):
            return True
        return callable(obj)

    @staticmethod
    def is_string(obj):
        return isinstance(obj, str)

    @staticmethod
    def is_class(obj):
        """Check an object is a class, not an instance of one nor a plain function"""
        return inspect.isclass(obj)

    #########################################################################
    # Member tables
    #########################################################################

    @staticmethod
    def is_built(clazz):
        """Return true if clazz was produced by a ClassFactory"""
        from .Prototype import Prototype
        return inspect.isclass(clazz) and isinstance(vars(clazz).get("prototype"), Prototype)

    @staticmethod
    def prototype(clazz):
        """Instance-scope member table of a class.

        Built classes answer their live Prototype; any other class answers a
        snapshot of its non-dunder attributes.
        """
        if ObjUtil.is_built(clazz):
            return vars(clazz)["prototype"]
        return {k: v for k, v in vars(clazz).items() if not (k.startswith("__") and k.endswith("__"))}

    @staticmethod
    def statics(clazz):
        """Static member table of a class (empty for classes not built by a factory)"""
        if ObjUtil.is_built(clazz):
            return vars(clazz)["__statics__"]
        return {}

    @staticmethod
    def members(obj):
        """Own member table of a map, class, constructed object or function"""
        if obj is None:
            return {}
        if isinstance(obj, Mapping):
            return obj
        if inspect.isclass(obj):
            return ObjUtil.statics(obj)
        from .Obj import Obj
        if isinstance(obj, Obj):
            # object members: its class's prototype overlaid with own fields
            table = dict(ObjUtil.prototype(type(obj)))
            table.update(getattr(obj, "__dict__", {}))
            return table
        return dict(getattr(obj, "__dict__", {}))

    @staticmethod
    def bind(fn, receiver):
        """Bind fn to receiver the way attribute access on receiver would"""
        if inspect.isclass(fn) or not hasattr(fn, "__get__"):
            return fn
        return fn.__get__(receiver, type(receiver))

    #########################################################################
    # Traversal
    #########################################################################

    @staticmethod
    def each(collection, fn):
        """Loop over a collection.

        Over a string or a sequence fn is called as fn(value, index, collection);
        over a map, a class (its statics) or a function (its attributes) as
        fn(key, value, collection). Any other value is treated as a one element
        list. Returning STOP from fn ends the loop. Returns the list of values
        returned by fn, the terminating one included, or None when collection or
        fn is missing.
        """
        if collection is None or fn is None:
            return None

        is_seq = ObjUtil.is_string(collection) or ObjUtil.is_array(collection)
        if not is_seq and not ObjUtil.is_map(collection) and not ObjUtil.is_function(collection):
            collection = [collection]
            is_seq = True

        if is_seq:
            pairs = ((collection[i], i) for i in range(len(collection)))
        else:
            # snapshot so fn may write back into the collection
            pairs = list(ObjUtil.members(collection).items())

        result = []
        for a, b in pairs:
            r = fn(a, b, collection)
            result.append(r)
            if r is STOP:
                break
        return result
