#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# classface - classes, mixins, statics, singletons and late-bound super calls
# composed at runtime

# Base types
from .Obj import Obj
from .ObjUtil import ObjUtil, STOP

# Composition
from .Prototype import Prototype
from .Extend import extend, DEFAULT_EXCLUSIONS
from .Super import Dispatcher, make_super

# Factory and lifecycle
from .Registry import ReadyRegistry, ReadyEntry
from .Class import ClassFactory, Class

# Environment and logging
from .Env import Env
from .Log import Log, LogLevel, LogRec

# Errors
from .Err import Err, ArgErr, NameErr

each = ObjUtil.each
is_map = ObjUtil.is_map
is_array = ObjUtil.is_array
is_function = ObjUtil.is_function
is_string = ObjUtil.is_string
is_class = ObjUtil.is_class
