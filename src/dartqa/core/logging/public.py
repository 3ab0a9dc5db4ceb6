# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

_CONSOLES: dict[tuple[bool, bool], Console] = {}


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _console(*, color: bool, emoji: bool) -> Console:
    """Return a cached console configured for ``color`` and ``emoji``."""

    key = (color, emoji)
    if key not in _CONSOLES:
        _CONSOLES[key] = Console(
            no_color=not color,
            emoji=emoji,
            highlight=False,
            soft_wrap=True,
        )
    return _CONSOLES[key]


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = _console(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def configure_logging(*, debug: bool) -> None:
    """Install a Rich log handler on the ``dartqa`` logger hierarchy.

    Args:
        debug: When ``True`` diagnostic records down to ``DEBUG`` are shown,
            otherwise only warnings and above.
    """

    logger = logging.getLogger("dartqa")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=debug,
            markup=False,
        )
        logger.addHandler(handler)
