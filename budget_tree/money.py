""" A module providing a `Money` class.

`Money` is an extension of the `py-moneyed` `Money` class, with added
methods for rounding, hashing, and comparison with non-`Money` zero
values. Plain numbers are converted through `str`, so that floats
provided by client code don't carry binary rounding error into
balances.
"""

from decimal import Decimal
from moneyed import Money as PyMoney

DEFAULT_CURRENCY = 'CAD'

class Money(PyMoney):
    """ Extends py-moneyed to support Decimal-like functions. """

    # We're only extending Money's magic methods for convenience, not
    # adding new public methods.
    # pylint: disable=too-few-public-methods

    default_currency = DEFAULT_CURRENCY

    def __init__(self, amount=Decimal('0.0'), currency=None):
        """ Initializes with application-level default currency.

        Also allows for initializing from another Money object.
        """
        if isinstance(amount, PyMoney):
            if currency is None:
                currency = amount.currency
            amount = amount.amount
        elif isinstance(amount, float):
            amount = Decimal(str(amount))
        if currency is None:
            currency = self.default_currency
        super().__init__(amount, currency)

    def __round__(self, ndigits=None):
        """ Rounds to ndigits """
        return Money(round(self.amount, ndigits), self.currency)

    def __hash__(self):
        """ Allows for use in sets and as dict keys. """
        # Equality of Money objects is based on amount and currency.
        return hash(self.amount) + hash(self.currency)

    def __eq__(self, other):
        """ Extends == operator to allow comparison with Decimal.

        This allows for comparison to 0 (or other Decimal-convertible
        values), but not with other Money objects in different
        currencies.
        """
        # NOTE: If the other object is also a Money object, this
        # won't fall back to Decimal, because Decimal doesn't know how
        # to compare itself to Money. This is good, because otherwise
        # we'd be comparing face values of different currencies,
        # yielding incorrect behaviour like JPY1 == USD1.
        if isinstance(other, PyMoney):
            return super().__eq__(other)
        return self.amount == other

    def __ne__(self, other):
        return not self == other

    def __lt__(self, other):
        """ Extends < operator to allow comparison with 0 """
        if not isinstance(other, PyMoney) and other == 0:
            return self.amount < 0
        return super().__lt__(other)

    def __gt__(self, other):
        """ Extends > operator to allow comparison with 0 """
        if not isinstance(other, PyMoney) and other == 0:
            return self.amount > 0
        return super().__gt__(other)

    def __le__(self, other):
        """ Extends <= operator to allow comparison with 0 """
        return not self > other

    def __ge__(self, other):
        """ Extends >= operator to allow comparison with 0 """
        return not self < other

def as_money(value):
    """ Converts `value` to `Money` if it isn't already. """
    if isinstance(value, Money):
        return value
    return Money(value)

def as_weight(value):
    """ Converts a numeric weight (or fixed amount) to `Decimal`. """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))

# The smallest amount worth placing. Pools at or below this value are
# considered fully placed by the deposit distributor.
TOLERANCE = Decimal('0.01')
