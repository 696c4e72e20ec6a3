"""Terminal formatting -- ANSI colors for CLI output.

Colors are applied only when stdout is a terminal unless overridden with
``set_color_enabled``.
"""

import sys

# ---------------------------------------------------------------------------
# ANSI color codes
# ---------------------------------------------------------------------------

_RESET = '\033[0m'
_DIM = '\033[2m'

_GREEN = '\033[32m'
_YELLOW = '\033[33m'
_CYAN = '\033[36m'

_BOLD_RED = '\033[1;31m'
_BOLD_CYAN = '\033[1;36m'
_BOLD_WHITE = '\033[1;37m'


def _is_tty():
    """Check if stdout is a terminal (not piped)."""
    try:
        return sys.stdout.isatty()
    except AttributeError:
        return False


# Module-level flag -- set once at import time
_USE_COLOR = _is_tty()


def set_color_enabled(enabled: bool):
    """Override automatic color detection."""
    global _USE_COLOR
    _USE_COLOR = enabled


def _c(code: str, text: str) -> str:
    """Apply ANSI code if color is enabled."""
    if _USE_COLOR:
        return f'{code}{text}{_RESET}'
    return text


# ---------------------------------------------------------------------------
# CLI formatting helpers
# ---------------------------------------------------------------------------

def cli_header(text: str) -> str:
    """Bold cyan header line (one per root IFD)."""
    return _c(_BOLD_CYAN, text)


def cli_success(text: str) -> str:
    return _c(_GREEN, text)


def cli_warning(text: str) -> str:
    """Yellow text for degraded output."""
    return _c(_YELLOW, text)


def cli_error(text: str) -> str:
    """Red text for errors."""
    return _c(_BOLD_RED, text)


def cli_tag(text: str) -> str:
    """Cyan text for tag names."""
    return _c(_CYAN, text)


def cli_dim(text: str) -> str:
    """Dim text for types, counts and offsets."""
    return _c(_DIM, text)


def cli_bold(text: str) -> str:
    return _c(_BOLD_WHITE, text)


def cli_separator() -> str:
    """A visual separator line."""
    return _c(_DIM, '─' * 60)
