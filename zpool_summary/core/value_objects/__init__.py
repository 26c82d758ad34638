"""Core value objects"""

from .pool_name import is_valid_pool_name

__all__ = [
    'is_valid_pool_name'
]
