# -*- coding: utf-8 -*-
"""
Vehicle Maintenance Log Application Core Module
"""

from .config import Config, Pages

__all__ = ["Config", "Pages"]
