# -*- coding: utf-8 -*-
"""
Maintenance Wizards Package.

This package contains:
- build_diy_service_config: DIY service wizard (basic info, services, photos, review)
- build_shop_service_config: Shop service wizard (basic info, services, photos, notes)
- Steps: the step widgets both wizards are built from
"""

from .diy_service_wizard import build_diy_service_config, diy_persist_key
from .shop_service_wizard import build_shop_service_config, shop_persist_key

__all__ = [
    'build_diy_service_config',
    'build_shop_service_config',
    'diy_persist_key',
    'shop_persist_key'
]
