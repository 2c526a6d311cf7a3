"""Render a sequence as indexed lines."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any, TextIO

from mapreduce.config import DisplayConfig

_DEFAULT_CONFIG = DisplayConfig()


def format_list(items: Iterable[Any], config: DisplayConfig | None = None) -> list[str]:
    """Return the lines print_list would write, separators included."""
    config = config or _DEFAULT_CONFIG
    lines = [config.separator]
    for index, item in enumerate(items, start=config.start_index):
        lines.append(f"{index}{config.arrow}{item}")
    lines.append(config.separator)
    return lines


def print_list(
    items: Iterable[Any],
    config: DisplayConfig | None = None,
    file: TextIO | None = None,
) -> None:
    """Print each item as "index => item" between two separator lines.

    Args:
        items: The sequence to show; it is not transformed
        config: Rendering options, defaults to DisplayConfig()
        file: Output stream, defaults to sys.stdout
    """
    out = file if file is not None else sys.stdout
    for line in format_list(items, config):
        print(line, file=out)
