"""
Top‑level package for the gox user directory service.

This file makes ``gox`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``gox.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
