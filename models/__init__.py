# -*- coding: utf-8 -*-
"""
Vehicle Maintenance Log Data Models
"""

from .maintenance_log import MaintenanceLog

__all__ = [
    "MaintenanceLog",
]
