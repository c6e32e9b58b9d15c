"""
Bad Mod Tags database tooling: validation, issue intake and static API derivation.
"""

from .core.config import VERSION

__version__ = VERSION
