"""
globalphone – parse, validate and format telephone numbers per territory.

Import path convention::

    from globalphone import Context, Database
    from globalphone.numbering import Territory, Number
    from globalphone.errors import NotPossibleError
"""

from globalphone.context import Context, configure, default_context, parse, validate
from globalphone.data import Database
from globalphone.numbering import Number, Region, Territory, normalize

__version__ = "0.1.0"
__all__ = [
    "Context",
    "Database",
    "Number",
    "Region",
    "Territory",
    "__version__",
    "configure",
    "default_context",
    "normalize",
    "parse",
    "validate",
]
