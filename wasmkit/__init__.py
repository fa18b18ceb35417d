"""Locate and fetch Substrate WASM runtimes, and format their metadata and summaries."""

__version__ = "0.1.0"