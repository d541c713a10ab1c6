# -*- coding: utf-8 -*-
"""
Vehicle Maintenance Log Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import from_isoformat, to_isoformat

__all__ = [
    "get_logger",
    "setup_logger",
    "from_isoformat",
    "to_isoformat",
]
