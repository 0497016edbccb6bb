#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os
from types import MappingProxyType


class Env:
    """Runtime settings, read from CLASSFACE_* environment variables"""

    PREFIX = "CLASSFACE_"

    _instance = None

    def __init__(self, vars=None):
        self._vars = dict(os.environ if vars is None else vars)

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    @staticmethod
    def set_cur(env):
        """Replace the current environment, returning the previous one"""
        old = Env._instance
        Env._instance = env
        return old

    def runtime(self):
        return "py"

    def vars(self):
        """Get the captured environment variables (read-only)"""
        return MappingProxyType(self._vars)

    def config(self, name, default=None):
        """Get a setting by short name: config("log_level") reads CLASSFACE_LOG_LEVEL"""
        val = self._vars.get(Env.PREFIX + name.upper())
        if val is None or val.strip() == "":
            return default
        return val.strip()

    def log_level(self):
        return self.config("log_level", "info")
