"""
debug_logger.py
---------------
Console logger for Fireball Dodge.

Every line is tagged with the calling class (or module) and filtered by
category and verbosity. Startup uses the dotted init report:

    > DisplayManager ................... [OK]
        • Viewport 1280x720 (resizable)
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories print, and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Setup
        "system": True,
        "loading": True,
        "display": True,
        "input": False,

        # Session
        "game_state": True,
        "entity_spawn": True,
        "entity_cleanup": False,
        "collision": True,

        # Output
        "render": True,
    }

    SHOW_TIMESTAMP = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; never instantiated."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    # tag -> (color, level)
    TAGS = {
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    STATUS_COLORS = {
        "OK": Colors.GREEN,
        "LOADING": Colors.CYAN,
        "PLACEHOLDER": Colors.YELLOW,
        "FAIL": Colors.RED,
    }

    LEVEL_VALUES = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

    _warned_once = set()

    @staticmethod
    def set_level(level: str):
        level = level.upper()
        if level not in DebugLogger.LEVEL_VALUES:
            raise ValueError(f"Unknown log level: {level}")
        LoggerConfig.LOG_LEVEL = level

    @staticmethod
    def enable_category(category: str, enabled: bool = True):
        LoggerConfig.CATEGORIES[category] = enabled

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _source(depth: int = 3) -> str:
        """Name of the class (or CamelCased module) that called the public method."""
        try:
            frame = sys._getframe(depth)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__

        module = frame.f_globals.get("__name__", "unknown").rsplit(".", 1)[-1]
        return "".join(part.capitalize() for part in module.split("_"))

    @staticmethod
    def _enabled(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING or not LoggerConfig.CATEGORIES.get(category, False):
            return False
        allowed = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES[level] <= allowed

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger._enabled(category, level):
            return

        prefix = f"[{DebugLogger._source()}][{tag}] "
        if LoggerConfig.SHOW_TIMESTAMP:
            prefix = f"[{datetime.now():%H:%M:%S}] " + prefix
        print(f"{color}{prefix}{message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        """Phase changes and other one-off state transitions."""
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "system"):
        """Per-frame detail, only shown at VERBOSE."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    @staticmethod
    def warn_once(msg: str, category: str = "system"):
        """Warn the first time a message is seen (render-loop safe)."""
        if msg in DebugLogger._warned_once:
            return
        DebugLogger._warned_once.add(msg)
        DebugLogger._log("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, category)

    # ===========================================================
    # Init Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger.format_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{'    ' * level}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def format_entry(module: str, status: str) -> str:
        """'> Module' padded to the status column, dot leader, then [STATUS]."""
        label = f"> {module}"
        badge = f"[{status}]"
        padded = label.ljust(max(DebugLogger.STATUS_COLUMN, len(label) + 1))
        dots = "." * max(DebugLogger.LINE_LENGTH - len(padded) - len(badge) - 1, 1)
        color = DebugLogger.STATUS_COLORS.get(status.upper(), Colors.WHITE)
        return f"{Colors.WHITE}{padded}{dots} {color}{badge}{Colors.RESET}"
