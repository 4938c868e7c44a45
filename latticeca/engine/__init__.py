"""Engines that drive grids and consumers that observe them."""

from .base import Consumer, Engine
from .sequential import LoggingConsumer, ReprRecorder, Sequential

__all__ = [
    'Consumer',
    'Engine',
    'Sequential',
    'ReprRecorder',
    'LoggingConsumer',
]
