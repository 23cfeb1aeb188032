"""Command line entrypoints for data complexity extraction."""

from __future__ import annotations

from .extract import build_parser as build_extract_parser, main as extract_main

__all__ = ["build_extract_parser", "extract_main"]
