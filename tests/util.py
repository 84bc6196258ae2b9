""" Provides convenience classes and methods for testing. """

import unittest
from decimal import Decimal
from budget_tree import Account, Leaf

# How many digits to round results to:
PLACES_PRECISION = 2

class TestCaseBudget(unittest.TestCase):
    """ A test case that compares `Money` values by amount. """

    def assertAlmostEqual(
            self, first, second, places=None, msg=None, delta=None):
        """ Overrides assertAlmostEqual to accept `Money` and numbers.

        `Money` values are compared by amount, and plain numbers are
        converted to `Decimal` so that the two can be compared.
        """
        # pylint: disable=invalid-name
        # The naming here uses the style of unittest `assert*` methods.
        if places is None and delta is None:
            places = PLACES_PRECISION
        super().assertAlmostEqual(
            _to_decimal(first), _to_decimal(second),
            places=places, msg=msg, delta=delta)

    def assertBalances(self, root, balances, places=None):
        """ Tests the balances of several accounts in `root`'s tree.

        Args:
            root (Account): The root of the tree to search.
            balances (dict[str, Any]): Maps account names to expected
                balances.
        """
        # pylint: disable=invalid-name
        for name, balance in balances.items():
            self.assertAlmostEqual(
                root.find(name).balance(), balance, places=places,
                msg='balance of ' + repr(name))

def _to_decimal(value):
    """ Converts Money or a plain number to Decimal. """
    value = getattr(value, 'amount', value)
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))

def add_leaf(parent, name, inflow, max=0, balance=0):
    """ Adds a leaf account to `parent` and returns it. """
    # pylint: disable=redefined-builtin
    account = Account(name, Leaf(balance=balance, max=max))
    parent.add_child(account, inflow)
    return account

def add_branch(parent, name, inflow):
    """ Adds an empty branch account to `parent` and returns it. """
    account = Account.branch(name)
    parent.add_child(account, inflow)
    return account
