#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility modules for apidoc2md."""
