"""Textual widgets for scripture-spotlight."""

from scripture_spotlight.widgets.reference_input import ReferenceInput
from scripture_spotlight.widgets.status_bar import StatusBar
from scripture_spotlight.widgets.tips_panel import TipsPanel

__all__ = [
    "ReferenceInput",
    "StatusBar",
    "TipsPanel",
]
