"""Capture adapters - implementations of ScreenCapture port."""

from .mss_capture import MssScreenCapture

__all__ = ['MssScreenCapture']
