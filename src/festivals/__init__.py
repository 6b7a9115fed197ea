"""Festivals package exports."""

from festivals.agenda import Agenda
from festivals.models import Festival, Month, Style

__all__ = [
    "Agenda",
    "Festival",
    "Month",
    "Style",
]
