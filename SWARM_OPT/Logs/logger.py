# logger.py
# Colored console logging shared by every SWARM_OPT module.
# Modules pass their own name: module_name = Path(__file__).stem

import sys
import datetime
import os

# --- Configuration ---
# Set to False to disable color output (e.g., when piping into a file)
ENABLE_COLOR = True
DEBUG = os.environ.get("SWARM_OPT_DEBUG") == "1"

MODULE_PADDING = 25


# --- ANSI Escape Codes ---
class Colors:
    RESET = "\033[0m"
    CYAN = "\033[0;36m"
    PURPLE = "\033[0;35m"
    BOLD_RED = "\033[1;31m"
    BOLD_GREEN = "\033[1;32m"
    BOLD_YELLOW = "\033[1;33m"
    BOLD_BLUE = "\033[1;34m"


# --- Level -> Color ---
COLOR_MAP = {
    "default": Colors.RESET,
    "error": Colors.BOLD_RED,
    "warning": Colors.BOLD_YELLOW,
    "info": Colors.CYAN,
    "success": Colors.BOLD_GREEN,
    "debug": Colors.PURPLE,
    "header": Colors.BOLD_BLUE,
}


def configure(debug=None, enable_color=None):
    """Changes the debug / color switches at runtime (e.g. from a CLI flag)."""
    global DEBUG, ENABLE_COLOR
    if debug is not None:
        DEBUG = bool(debug)
    if enable_color is not None:
        ENABLE_COLOR = bool(enable_color)


def _use_color(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return ENABLE_COLOR and callable(isatty) and isatty()


def log(message: str, module_name: str = "INFO", color_name: str = "default", stream=None):
    """
    Prints a formatted log message to the console.

    Args:
        message (str): The message to print.
        module_name (str): The name of the calling module, usually Path(__file__).stem.
        color_name (str): Level name selecting the color (e.g. "info", "warning").
        stream: Output stream, defaults to the current sys.stdout.
    """
    stream = stream if stream is not None else sys.stdout
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    if _use_color(stream):
        color_code = COLOR_MAP.get(color_name.lower(), Colors.RESET)
        reset_code = Colors.RESET
    else:
        color_code = ""
        reset_code = ""

    padded_module = f"[{module_name:<{MODULE_PADDING}}]"
    print(f"{timestamp} {padded_module} {color_code}{message}{reset_code}", file=stream)
    stream.flush()


# --- Helper Functions for Common Levels ---

def log_error(message: str, module_name: str = "ERROR"):
    log(message, module_name, "error")


def log_warning(message: str, module_name: str = "WARNING"):
    log(message, module_name, "warning")


def log_info(message: str, module_name: str = "INFO"):
    log(message, module_name, "info")


def log_success(message: str, module_name: str = "SUCCESS"):
    log(message, module_name, "success")


def log_debug(message: str, module_name: str = "DEBUG"):
    """Logs a debug message, only when DEBUG is enabled."""
    if DEBUG:
        log(message, module_name, "debug")


def log_header(message: str, module_name: str = "HEADER"):
    """Logs a header/section title message."""
    log(message, module_name, "header")
