# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""jotter - scaffold diary and note entries for a Markdown journal."""

__version__ = "0.1.0"
