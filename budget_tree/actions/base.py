""" Value types describing the changes that can be made to a tree.

Each action names the accounts it affects; names are resolved against
the tree when the action is applied (see `ActionEngine`). The `date`
of money-moving actions is recorded but doesn't affect how money is
allocated.
"""

import datetime
from dataclasses import dataclass, field
from typing import Optional
from budget_tree.money import Money, as_money
from budget_tree.accounts.base import Leaf, Branch

@dataclass
class New:
    """ Create account `name` under the branch named `parent`.

    Attributes:
        name (str): The name of the new account.
        inflow (Fixed, Flex): The new account's allocation policy
            within `parent`.
        parent (str): The name of an existing branch account.
        data (Leaf, Branch): The state of the new account. Optional.
            Defaults to an empty `Branch`.
    """
    name: str
    inflow: object
    parent: str
    data: object = None

    def __post_init__(self):
        if self.data is None:
            self.data = Branch()
        elif not isinstance(self.data, (Leaf, Branch)):
            raise TypeError(
                'New: data must be a Leaf or Branch, got '
                + str(type(self.data)))

@dataclass
class Withdraw:
    """ Remove `amount` from the leaf account named `account`. """
    account: str
    amount: Money
    date: datetime.date = field(default_factory=datetime.date.today)

    def __post_init__(self):
        self.amount = as_money(self.amount)

@dataclass
class Deposit:
    """ Deposit `amount` into `account` (or the root, if None). """
    account: Optional[str]
    amount: Money
    date: datetime.date = field(default_factory=datetime.date.today)

    def __post_init__(self):
        self.amount = as_money(self.amount)

@dataclass
class Transfer:
    """ Withdraw from `source` and deposit into `target` (or the root).

    The fields are named `source`/`target` (rather than `from`/`to`)
    because `from` is a Python keyword.
    """
    source: str
    target: Optional[str]
    amount: Money
    date: datetime.date = field(default_factory=datetime.date.today)

    def __post_init__(self):
        self.amount = as_money(self.amount)

ACTION_TYPES = (New, Withdraw, Deposit, Transfer)
