"""
Profile module
"""
from .service import ProfileStore

__all__ = ['ProfileStore']
