""" A package with various self-contained methods and classes.

These are used throughout the application and provide ways to read and
write JSON-encoded values and to dispatch on the type of a value.
"""

# See budget_tree.__init__.py for version, author, and licensing info.

__all__ = ['value_reader', 'register']

from budget_tree.utility.value_reader import (
    ValueReader, ValueReaderAttribute, DecimalJSONEncoder)
from budget_tree.utility.register import (
    MethodRegister, registered_method, registered_method_for)
