# logger_utils.py -  for logging messages and performance metrics, timestamps etc

import os
import sys
import time
from datetime import datetime
from typing import Optional

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Log:
    """
    Lightweight logger for writing messages and tracking metrics.
    Class level so every module shares one configuration:
        Log.configure(level="INFO", path="logs/logos.log")
        Log.info("[analyze] done")
    Lines go to stderr (stdout stays free for reports) and, when a path is
    configured, are appended to that file.
    """
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    level = "WARNING"
    path: Optional[str] = None
    use_color = True

    @classmethod
    def configure(cls, level: str = "WARNING", path: Optional[str] = None, use_color: bool = True):
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}, expected one of {LEVELS}")
        cls.level = level
        cls.path = path
        cls.use_color = use_color
        if path:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    @classmethod
    def enabled(cls, level: str) -> bool:
        return LEVELS.index(level) >= LEVELS.index(cls.level)

    @classmethod
    def write(cls, msg: str, level: str = "INFO"):
        """
        Emit a log message with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if not cls.enabled(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if cls.path:
            with open(cls.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        # console (color enabled etc)
        if cls.use_color and level in cls.COLORS:
            print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}", file=sys.stderr)
        else:
            print(line, file=sys.stderr)

    # Public logging methods
    @classmethod
    def debug(cls, msg: str):
        cls.write(msg, "DEBUG")

    @classmethod
    def info(cls, msg: str):
        cls.write(msg, "INFO")

    @classmethod
    def warning(cls, msg: str):
        cls.write(msg, "WARNING")

    @classmethod
    def error(cls, msg: str):
        cls.write(msg, "ERROR")

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats) at INFO level.
        Example: [2026-01-02 12:45:02] INFO    | markov.build: 0.123s
        """
        cls.write(f"{tag}: {value}{unit}", "INFO")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("analyze"):
                do_some_work()
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record how long the block took as a metric. Exceptions propagate."""
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
        return False
