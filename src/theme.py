"""Color & style helpers for the weekly table.

Color is on only for a TTY (or FORCE_COLOR=1) and off whenever NO_COLOR is
set. Truecolor is used when COLORTERM advertises it, the xterm 256-color
cube otherwise. Palette entries can be overridden with TODO_*_COLOR
environment variables holding a 6-digit hex value.
"""
from __future__ import annotations
import os, sys

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_ENABLE = (_FORCE or sys.stdout.isatty()) and "NO_COLOR" not in os.environ
_TRUECOLOR = any(tok in os.environ.get("COLORTERM", "").lower() for tok in ("truecolor", "24bit"))

_HEX_DIGITS = set('0123456789abcdefABCDEF')

def _sgr(*params: object) -> str:
    if not _ENABLE:
        return ''
    return "\033[" + ';'.join(str(p) for p in params) + "m"

def _fg(hex_code: str) -> str:
    """Foreground escape for '#rrggbb'."""
    rgb = [int(hex_code[i:i + 2], 16) for i in (1, 3, 5)]
    if _TRUECOLOR:
        return _sgr(38, 2, *rgb)
    r6, g6, b6 = (round(c * 5 / 255) for c in rgb)
    return _sgr(38, 5, 16 + 36 * r6 + 6 * g6 + b6)

def _palette(env_key: str, default: str) -> str:
    h = os.environ.get(env_key, '').strip().lstrip('#')
    if len(h) == 6 and set(h) <= _HEX_DIGITS:
        return '#' + h
    return default

RESET = _sgr(0)
BOLD = _sgr(1)
DIM = _sgr(2)

HEADER_COLOR = _fg(_palette('TODO_HEADER_COLOR', '#476EAE')) + BOLD
BORDER_COLOR = _fg(_palette('TODO_HEADER_COLOR', '#476EAE'))

# keyed by Mark value so this module stays free of model imports
MARK_COLOR = {
    'Y': _fg(_palette('TODO_DONE_COLOR', '#A7E399')),
    'X': _fg(_palette('TODO_NOT_DONE_COLOR', '#E36A6A')),
    '?': DIM + _fg(_palette('TODO_UNSET_COLOR', '#8A8A8A')),
}

def color(text: str, *styles: str) -> str:
    """Wrap text in the given styles, or return it untouched when color is off."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = ['color', 'HEADER_COLOR', 'BORDER_COLOR', 'MARK_COLOR']
