# SPDX-License-Identifier: MIT
"""Command line interface for tagver."""

__version__ = "0.1.0"
