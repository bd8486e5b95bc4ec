"""Timing, model description access and debugger state for a calculator emulator."""

__version__ = "0.1.0"