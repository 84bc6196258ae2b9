""" Provides a class for reading stored values from JSON files. """

import json
from decimal import Decimal
from moneyed import Money as PyMoney

INFINITY = float('inf')

class ValueReaderAttribute(object):
    """ A descriptor for managed attributes of `ValueReader`.

    Attributes with this descriptor are get and set via the `values`
    dict (rather than `__dict__`).
    """

    def __init__(self, default=None):
        self.default = default
        self.name = None # set in __set_name__

    def __set_name__(self, owner, name):
        # Called when the class `owner` is defined, passes the name
        # of the attribute to which this descriptor is assigned.
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        # If a value hasn't been read in for this attribute, use the
        # default value if one has been provided:
        if self.name not in obj.values and self.default is not None:
            return self.default
        # Return the value read in from file (or raise a KeyError if
        # it's missing and there's no default):
        return obj.values[self.name]

    def __set__(self, obj, value):
        obj.values[self.name] = value

    def __delete__(self, obj):
        del obj.values[self.name]

class DecimalJSONEncoder(json.JSONEncoder):
    """ Extends JSONEncoder to losslessly encode `Decimal` and `Money`.

    Both are written as strings (e.g. `"12.50"`); `Money` values are
    written as their amount only.
    """

    def default(self, o):
        if isinstance(o, PyMoney):
            return str(o.amount)
        if isinstance(o, Decimal):
            return str(o)
        return super().default(o)

class ValueReader(object):
    """ Reads values from JSON-encoded files.

    Values read from the JSON file are stored in a `values` dict.
    Subclasses can expose these values as attributes by providing
    `ValueReaderAttribute` instances as class variables with the same
    name as a key in the `values` dict. For example, setting the class
    variable `attr = ValueReaderAttribute()` will result in calls to
    `ValueReader(filename).attr` to return the value associated with the
    `"attr"` key in the JSON file named by `filename`.

    Floating-point numbers are read as `Decimal`. Strings are never
    converted to numbers, so names like `"2020"` stay strings.

    Arguments:
        filename (str): The filename of a JSON file to read.
            The file must be UTF-8 encoded. Optional.
    """

    def __init__(self, filename=None):
        self.values = {}
        if filename is not None:
            self.read(filename)

    def read(self, filename):
        """ Reads in values from file `filename`.

        Any existing values in `self.values` are cleared - only values
        read in from `filename` will be stored.

        Raises:
            FileNotFoundError: No such file or directory.
            TypeError: The file doesn't contain a JSON object.
        """
        with open(filename, "rt", encoding="utf-8") as file:
            values = json.load(
                file,
                parse_float=Decimal,
                parse_constant=self._parse_constant)
        if not isinstance(values, dict):
            raise TypeError('JSON file must provide dict of key: value pairs')
        self.values = values

    @staticmethod
    def _parse_constant(val):
        """ Parses 'Infinity' and '-Infinity' from JSON files. """
        if val == 'Infinity':
            return Decimal(INFINITY)
        if val == '-Infinity':
            return -Decimal(INFINITY)
        # We don't support non-infinite special constants (which, as of
        # Python 3.7, is just 'NaN'):
        raise ValueError("'" + val + "' value not supported.")

    def write(self, filename, vals=None):
        """ Writes values to a UTF-8 encoded JSON file.

        filename (str): The filename of the JSON file to write.
        vals (dict[str, Any]): A mapping of str-valued keys to values.
            Optional. Defaults to this object's `values`.
        """
        if vals is None:
            vals = self.values
        with open(filename, "w", encoding="utf-8") as file:
            json.dump(
                vals, file, cls=DecimalJSONEncoder,
                ensure_ascii=True, indent=2)
            file.write('\n')
