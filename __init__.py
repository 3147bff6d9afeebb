"""PrecisionTape - decimal inch to tape-measure fraction conversion.

This __init__.py makes the project directory a proper Python package,
enabling relative imports between submodules (core, models, storage, lib).
"""

from . import core
from . import models
from . import storage

__all__ = ['core', 'models', 'storage']
