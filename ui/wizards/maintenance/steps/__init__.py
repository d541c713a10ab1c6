# -*- coding: utf-8 -*-
"""
Maintenance Wizard Steps Package.

- Basic info (DIY and Shop variants)
- Services performed
- Photos
- Notes (Shop)
- Review (DIY)
"""

from .basic_info_step import BasicInfoStep, ShopBasicInfoStep
from .services_step import ServicesStep
from .photos_step import PhotosStep
from .notes_step import NotesStep
from .review_step import ReviewStep

__all__ = [
    'BasicInfoStep',
    'ShopBasicInfoStep',
    'ServicesStep',
    'PhotosStep',
    'NotesStep',
    'ReviewStep'
]
