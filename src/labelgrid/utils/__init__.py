"""Generic utilities and helpers.

This is a collection of generic utilities and helpers
that are used by the containers but are not
part of the tabular engine itself, like formatting
containers for print or naming the functions
applied to them in log messages.
"""

from . import inspect, tabulate

__all__ = ("inspect", "tabulate")
