# SPDX-License-Identifier: MIT
"""Textual terminal UI for Group Sessions."""
