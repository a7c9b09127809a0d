from __future__ import annotations

"""
qtree: recursive directory listing with text, JSON and XML renderers.
"""

from qtree.domain.constants import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ["APP_NAME", "APP_VERSION", "__version__"]
