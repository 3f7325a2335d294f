"""
geopath.auth.models

Auth domain models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity; `subject` is the owner id of every path it creates.
    """

    subject: str


# --- Module Notes -----------------------------------------------------------
# Keep this model minimal; the path service only ever sees `subject`.
