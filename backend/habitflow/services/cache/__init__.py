"""
Local cache module
"""
from .service import (
    MemoryCache,
    FileCache,
    read_cached_list,
    write_cached_list
)

__all__ = [
    'MemoryCache',
    'FileCache',
    'read_cached_list',
    'write_cached_list'
]
