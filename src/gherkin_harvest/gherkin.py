"""Marker function scanned for by :func:`gherkin_harvest.extract`.

Client code writes::

    from gherkin_harvest import gherkin

    gherkin.Scenario('''
        Scenario: reading accounts
        Given Bruce has registered a user account
         Then he is able to read it
    ''')

Extraction reads the literal from source and never runs the call; the
runtime return value only matters to code that uses it directly.
"""

from __future__ import annotations

from typing import Any

from .utils import normalize_scenario


def Scenario(fmt: str, *args: Any) -> str:  # noqa: N802
    """Format ``fmt`` %-style with ``args``, drop tabs, trim the ends."""
    text = fmt % args if args else fmt
    return normalize_scenario(text)
