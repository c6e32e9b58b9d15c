"""
Derived static API - read-only documents regenerated wholesale from the canonical store.
"""

from .build import build_api, generate_stats, create_mod_entry, build_platform_index, write_api_tree

__all__ = [
    'build_api',
    'generate_stats',
    'create_mod_entry',
    'build_platform_index',
    'write_api_tree'
]
