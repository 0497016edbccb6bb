#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Err(Exception):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        self._msg = msg
        self._cause = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def to_str(self):
        name = type(self).__name__
        if self._msg:
            return f"{name}: {self._msg}"
        return name

    def trace_to_str(self):
        """Return stack trace as string"""
        import traceback

        s = self.to_str()
        tb = getattr(self, '__traceback__', None)
        if tb:
            s += "\n" + "".join(traceback.format_tb(tb))
        if self._cause:
            if hasattr(self._cause, 'trace_to_str'):
                s += "\n  Caused by: " + self._cause.trace_to_str()
            else:
                s += f"\n  Caused by: {self._cause}"
        return s

    def __str__(self):
        return self.to_str()


class ArgErr(Err):
    """Argument error - raised when a class declaration is malformed"""
    pass


class NameErr(Err):
    """Name error - raised for invalid identifiers such as log names"""
    pass
