"""
Application package initializer.

The service is organised in three layers: HTTP handlers live in
``api/endpoints``, orchestration lives in ``services`` and the
in‑memory user store lives in ``repositories``.  Shared helpers for
configuration, logging and response rendering live in ``core``.
"""

from .main import create_app  # noqa: F401
