"""
Module: bot/utils.py

Provides utility functions for logging, configuration parsing and
reconstructing slash commands for the invocation log.
"""
import inspect, os
from datetime import datetime, UTC
from colorama import init, Fore, Style

init(autoreset=True)

LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}
_min_level = LEVELS["info"]


def set_log_level(level):
    """
    Set the minimum level printed by log_message.

    Unknown level names fall back to "info".
    """
    global _min_level
    _min_level = LEVELS.get(str(level).lower(), LEVELS["info"])


def log_message(message, level="info"):
    """
    Print a timestamped, colored log message with the caller's relative source path.

    Parameters:
    - message: The log message string.
    - level: One of "info", "debug", "warning", or "error" for coloring.
    """
    if LEVELS.get(level.lower(), LEVELS["info"]) < _min_level:
        return

    frame    = inspect.currentframe().f_back
    fullpath = frame.f_code.co_filename
    cwd      = os.getcwd()
    if fullpath.startswith(cwd + os.sep):
        filename = fullpath[len(cwd)+1:]
    else:
        filename = fullpath
    lineno   = frame.f_lineno

    timestamp = f"[{datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')}]"
    color_map = {
        "info": Fore.GREEN,
        "debug": Fore.BLUE,
        "warning": Fore.YELLOW,
        "error": Fore.RED
    }
    level_prefix = f"{level.upper():<7}"
    level_color = color_map.get(level.lower(), Fore.WHITE)

    prefix = f"[{timestamp}] {filename}({lineno}):"
    print(f"{prefix} {level_color}{level_prefix} {message}{Style.RESET_ALL}")


def parse_id_list(raw):
    """
    Parse a comma-separated list of numeric Discord ids.

    Non-numeric entries are skipped.
    """
    return [int(part.strip()) for part in (raw or "").split(",") if part.strip().isdigit()]


def parse_name_list(raw):
    """Parse a comma-separated list of names, dropping blanks."""
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


def parse_role_map(raw):
    """
    Parse a command-to-roles mapping.

    Format: "command=role,role;command=role". Entries without "=" or
    without any role are skipped.

    Returns a dict of command name -> list of role names.
    """
    mapping = {}
    for entry in (raw or "").split(";"):
        if "=" not in entry:
            continue
        command, roles = entry.split("=", 1)
        command = command.strip()
        role_list = parse_name_list(roles)
        if command and role_list:
            mapping[command] = role_list
    return mapping


def _format_value(value):
    val_str = str(value)
    if isinstance(value, str) and (' ' in val_str or ':' in val_str):
        val_str = f'"{val_str}"'
    return val_str


def format_command(data):
    """
    Rebuild the raw slash command from interaction data, e.g.
    `/닉네임 channel:123`, quoting values that contain spaces or colons.

    Subcommands (option type 1) are expanded with their own options.
    """
    cmd = f"/{data.get('name', '?')}"
    for opt in data.get('options', []) or []:
        if opt.get('type') == 1:
            cmd += f" {opt['name']}"
            for subopt in opt.get('options', []) or []:
                cmd += f" {subopt['name']}:{_format_value(subopt.get('value'))}"
        else:
            cmd += f" {opt['name']}:{_format_value(opt.get('value'))}"
    return cmd
