# -*- coding: utf-8 -*-
"""
Vehicle Maintenance Log Repository Layer
"""

from .draft_repository import DraftRepository

__all__ = [
    "DraftRepository",
]
