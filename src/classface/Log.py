#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#
# Log - Logging support for classface
#
import logging
from datetime import datetime


class LogLevel:
    """
    LogLevel represents the severity of a log message.
    """

    _levels = {}

    def __init__(self, name, ordinal, py_level):
        self._name = name
        self._ordinal = ordinal
        self._py_level = py_level

    @staticmethod
    def from_str(name, checked=True):
        """Parse LogLevel from string"""
        name_lower = name.lower()
        if name_lower in LogLevel._levels:
            return LogLevel._levels[name_lower]
        if checked:
            from .Err import ArgErr
            raise ArgErr(f"Unknown log level: {name}")
        return None

    @staticmethod
    def vals():
        return [LogLevel.debug, LogLevel.info, LogLevel.warn, LogLevel.err, LogLevel.silent]

    def name(self):
        return self._name

    def ordinal(self):
        return self._ordinal

    def py_level(self):
        """Matching level of the standard logging module"""
        return self._py_level

    def to_str(self):
        return self._name

    def __str__(self):
        return self.to_str()

    def __lt__(self, other):
        return self._ordinal < other._ordinal

    def __le__(self, other):
        return self._ordinal <= other._ordinal

    def __gt__(self, other):
        return self._ordinal > other._ordinal

    def __ge__(self, other):
        return self._ordinal >= other._ordinal

    def __eq__(self, other):
        if not isinstance(other, LogLevel):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash(self._ordinal)


LogLevel.debug = LogLevel("debug", 0, logging.DEBUG)
LogLevel.info = LogLevel("info", 1, logging.INFO)
LogLevel.warn = LogLevel("warn", 2, logging.WARNING)
LogLevel.err = LogLevel("err", 3, logging.ERROR)
LogLevel.silent = LogLevel("silent", 4, logging.CRITICAL + 10)

for _level in LogLevel.vals():
    LogLevel._levels[_level.name()] = _level


class LogRec:
    """
    LogRec represents a single log record.
    """

    def __init__(self, time, level, log_name, msg, err=None):
        self._time = time
        self._level = level
        self._log_name = log_name
        self._msg = msg
        self._err = err

    def time(self):
        return self._time

    def level(self):
        return self._level

    def log_name(self):
        return self._log_name

    def msg(self):
        return self._msg

    def err(self):
        return self._err

    def to_str(self):
        return f"[{self._level.name()}] {self._log_name}: {self._msg}"

    def __str__(self):
        return self.to_str()


class Log:
    """
    Log provides logging functionality on top of the logging module.
    """

    _logs = {}
    _handlers = []

    def __init__(self, name, register=True):
        """Create a new log. If register=True, adds to global registry."""
        if not Log._is_valid_name(name):
            from .Err import NameErr
            raise NameErr(f"Invalid log name: {name}")

        if register and name in Log._logs:
            from .Err import ArgErr
            raise ArgErr(f"Log already registered: {name}")

        from .Env import Env
        self._name = name
        self._level = LogLevel.from_str(Env.cur().log_level(), False) or LogLevel.info
        self._py_logger = logging.getLogger(name)

        if register:
            Log._logs[name] = self

    @staticmethod
    def _is_valid_name(name):
        """Validate log name - must be valid identifier characters"""
        if not name:
            return False
        for c in name:
            if not (c.isalnum() or c == '.' or c == '_'):
                return False
        return True

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        if name in Log._logs:
            return Log._logs[name]
        return Log(name, True)

    @staticmethod
    def find(name, checked=True):
        """Find a log by name"""
        if name in Log._logs:
            return Log._logs[name]
        if checked:
            from .Err import ArgErr
            raise ArgErr(f"Unknown log: {name}")
        return None

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(new_level)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def is_enabled(self, level):
        return level._ordinal >= self._level._ordinal

    def is_debug(self):
        return self.is_enabled(LogLevel.debug)

    def debug(self, msg, err=None):
        if self.is_enabled(LogLevel.debug):
            self._log(LogLevel.debug, msg, err)

    def info(self, msg, err=None):
        if self.is_enabled(LogLevel.info):
            self._log(LogLevel.info, msg, err)

    def warn(self, msg, err=None):
        if self.is_enabled(LogLevel.warn):
            self._log(LogLevel.warn, msg, err)

    def err(self, msg, err=None):
        if self.is_enabled(LogLevel.err):
            self._log(LogLevel.err, msg, err)

    def _log(self, level, msg, err):
        self.log(LogRec(datetime.now(), level, self._name, msg, err))

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in list(Log._handlers):
            try:
                handler(rec)
            except Exception:
                self._py_logger.exception(f"log handler failed: {handler!r}")

        self._py_logger.log(rec._level.py_level(), rec._msg)
        if rec._err:
            self._py_logger.error(str(rec._err), exc_info=rec._err)

    def to_str(self):
        return self._name

    def __str__(self):
        return self.to_str()

    @staticmethod
    def handlers():
        return list(Log._handlers)

    @staticmethod
    def add_handler(handler):
        """Add a global log handler, called with every LogRec"""
        if not callable(handler):
            from .Err import ArgErr
            raise ArgErr("Handler must be callable")
        Log._handlers.append(handler)

    @staticmethod
    def remove_handler(handler):
        if handler in Log._handlers:
            Log._handlers.remove(handler)
