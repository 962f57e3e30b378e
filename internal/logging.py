import json
import os
import sys
import threading
from enum import IntEnum
from utils.timestamp import format_timestamp

class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self.stream = stream

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
            if error:
                record["err"] = str(error)
                error_id = getattr(error, "error_id", None)
                if error_id:
                    record["error_id"] = error_id
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except Exception:
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)
        return _logger

def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger

def parse_level(name, default=LogLevel.INFO):
    """Map a config string like "debug" or "WARNING" to a LogLevel."""
    if not name:
        return default
    name = name.upper()
    if name == "WARNING":
        name = "WARN"
    try:
        return LogLevel[name]
    except KeyError:
        return default


class FileLogger:
    """Append-only JSON-lines writer for trajectory records."""

    def __init__(self, file_path):
        self.path = file_path
        self._file = None
        self.written = 0

    def open(self):
        if self._file:
            return self
        dir_path = os.path.dirname(self.path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        self._file = open(self.path, "a")
        return self

    def close(self):
        if self._file:
            self._file.flush()
            self._file.close()
            self._file = None

    def log(self, kind, data):
        if self._file is None:
            self.open()
        self._file.write(json.dumps({"timestamp": format_timestamp(), "kind": kind, "data": data}, default=str) + "\n")
        self.written += 1

    def get_stats(self):
        return {"path": self.path, "written": self.written}

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_value, exc_tb):
        self.close()
        return False
