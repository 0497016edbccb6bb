#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from collections.abc import MutableMapping

from .ObjUtil import ObjUtil


# Bookkeeping names never copied by default
DEFAULT_EXCLUSIONS = {"__init__": True, "super_": True, "prototype": True}


def extend(destination, source, exclusions=None):
    """Copy the members of source onto destination.

    source may be a map, a constructed object, a class or a list of those; a
    list is applied in order so later entries win. Keys present in exclusions
    are skipped. A class source contributes its statics, then its prototype
    members (onto the destination's prototype when destination is a class).
    Copies onto a built class land in its static table and on its prototype.
    """
    if destination is None:
        return None

    if ObjUtil.is_array(source):
        for sub in source:
            extend(destination, sub, exclusions)
        return None

    if exclusions is None:
        exclusions = DEFAULT_EXCLUSIONS

    def copier(key, value, _collection):
        if key not in exclusions:
            _assign(destination, key, value)

    if ObjUtil.is_map(source):
        ObjUtil.each(source, copier)

    if ObjUtil.is_class(source):
        ObjUtil.each(ObjUtil.statics(source), copier)
        if ObjUtil.is_built(destination):
            extend(ObjUtil.prototype(destination), ObjUtil.prototype(source), exclusions)
        else:
            ObjUtil.each(ObjUtil.prototype(source), copier)
    return None


def _assign(destination, key, value):
    if ObjUtil.is_built(destination):
        # statics are visible from instances as well
        vars(destination)["__statics__"][key] = value
        vars(destination)["prototype"][key] = value
    elif isinstance(destination, MutableMapping):
        destination[key] = value
    elif getattr(type(destination), "__singleton__", False):
        vars(type(destination))["prototype"][key] = value
    else:
        setattr(destination, key, value)
