"""Timeline module: active-object scanning and per-kind dispatch."""

from .scanner import FrameObjects, collect, scan

__all__ = ['FrameObjects', 'collect', 'scan']
