"""
Pytest configuration for PrecisionTape tests.

This conftest.py loads the project directory as the `precision_tape` package
and creates module aliases so that tests can import project modules using
simple names (e.g., `from core.x import y`) while the production code uses
relative imports.

How it works:
1. Loads the project root's __init__.py as the `precision_tape` package
2. Creates module aliases so `import core` resolves to `precision_tape.core`
"""
import importlib.util
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent

# The project root is the package itself, so load it by location
# rather than relying on the checkout directory's name
_spec = importlib.util.spec_from_file_location(
    'precision_tape',
    project_root / '__init__.py',
    submodule_search_locations=[str(project_root)],
)
precision_tape = importlib.util.module_from_spec(_spec)
sys.modules['precision_tape'] = precision_tape
_spec.loader.exec_module(precision_tape)

import precision_tape.config as config
import precision_tape.core as core
import precision_tape.models as models
import precision_tape.storage as storage

sys.modules['config'] = config
sys.modules['core'] = core
sys.modules['models'] = models
sys.modules['storage'] = storage

# Also alias the submodules for imports like `from core.fractions import x`
sys.modules['core.fractions'] = core.fractions
sys.modules['core.formatting'] = core.formatting
sys.modules['core.tolerances'] = core.tolerances

sys.modules['models.measurement'] = models.measurement
sys.modules['models.history'] = models.history

sys.modules['storage.history'] = storage.history
