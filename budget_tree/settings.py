""" This module provides user-modifiable settings for the application. """

from decimal import Decimal
from budget_tree.money import DEFAULT_CURRENCY, TOLERANCE
from budget_tree.utility.value_reader import (
    ValueReader, ValueReaderAttribute as Attr)

FILENAME_DEFAULT = 'settings.json'

class Settings(ValueReader):
    """ Container for variables used to control application settings.

    All settings are exposed as attributes of `Settings` objects. For
    example, `Settings(filename).currency` will return the value of the
    `'currency'` key in the JSON file `filename`. Each attribute has a
    default value, which is used when the file doesn't provide one (or
    when no file is given at all).

    Keys in the file that don't correspond to an attribute are kept in
    `values` but otherwise ignored.

    Arguments:
        filename (str): The filename of a JSON file to read.
            The file must be UTF-8 encoded. Optional.

    Attributes:
        currency (str): A three-character string representing the
            currency of every amount in the tree. Defaults to 'CAD'.
        tolerance (Decimal): Deposits don't bother placing amounts at
            or below this value. Defaults to 0.01.
        display_places (int): The number of decimal places shown when
            rendering balances. Defaults to 2.
        indent (str): The string repeated once per level of depth when
            rendering the tree. Defaults to two spaces.
        atomic_transfers (bool): If True, transfers check that both
            accounts exist before withdrawing anything. If False, a
            transfer to a missing account still withdraws from the
            source account. Defaults to False.
    """

    currency = Attr(DEFAULT_CURRENCY)
    tolerance = Attr(TOLERANCE)
    display_places = Attr(2)
    indent = Attr('  ')
    atomic_transfers = Attr(False)

    def __init__(self, filename=None):
        super().__init__(filename)
        # JSON floats are read as Decimal, but ints stay ints:
        if 'tolerance' in self.values:
            self.tolerance = Decimal(str(self.tolerance))
