# engines/__init__.py
"""
English inflection engine.

    from engines import Engine, plural, an, inflect

`Engine` holds configuration (classical modes, custom words, gender,
article overrides). The module-level functions operate on one shared
default engine; see `engines.api`.
"""

from engines.api import *  # noqa: F401,F403
from engines.api import __all__  # noqa: F401
