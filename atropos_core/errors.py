from __future__ import annotations


class AtroposError(Exception):
    """Base class for errors raised by the Atropos core."""


class MalformedInput(AtroposError, ValueError):
    """The textual board encoding could not be parsed."""


class IllegalPlacement(AtroposError, ValueError):
    """A move targets a cell that cannot receive a color."""
