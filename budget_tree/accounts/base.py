""" A module providing the `Account` node of a budget tree. """

from dataclasses import dataclass, field
from budget_tree.money import Money, as_money
from budget_tree.errors import InvalidOperationError, InvalidTargetError
from budget_tree.accounts.inflow import INFLOW_TYPES

ROOT_NAME = 'root'

@dataclass
class Leaf:
    """ The state of a terminal account.

    Attributes:
        balance (Money): The money held by the account. May be
            negative (withdrawals aren't checked against it) and may
            exceed `max` (via overflow deposits).
        max (Money): The capacity of the account. Deposits are
            allocated to other accounts once this is reached, unless
            every account is full.
    """
    balance: Money = field(default_factory=Money)
    max: Money = field(default_factory=Money)

    def __post_init__(self):
        self.balance = as_money(self.balance)
        self.max = as_money(self.max)

@dataclass
class Branch:
    """ The state of an internal account.

    Attributes:
        children (list[BranchEntry]): The child accounts, in the order
            in which they were added. The order determines which
            `Fixed` children are filled first.
    """
    children: list = field(default_factory=list)

@dataclass
class BranchEntry:
    """ A child account, as seen by its parent.

    Attributes:
        account (Account): The child account.
        inflow (Fixed, Flex): The policy that determines how much of
            each deposit to the parent the child receives.
    """
    account: 'Account'
    inflow: object

class Account:
    """ A named node of a budget tree.

    An account is either a leaf, which holds a balance directly, or a
    branch, which holds an ordered sequence of child accounts (each
    with an inflow policy). A branch's balance and capacity are always
    the sums of its children's.

    Examples::

        root = Account.new_root()
        root.add_child(Account.leaf('rent', max=1000), Fixed(1000))
        root.add_child(Account.leaf('savings', max=5000), Flex(1))
        root.balance() == 0  # True

    Attributes:
        name (str): The name of the account. Names are used to look up
            accounts anywhere in the tree, so they should be unique
            across the whole tree.
        data (Leaf, Branch): The account's state.
    """

    def __init__(self, name, data=None):
        """ Initializes an `Account`.

        Args:
            name (str): The name of the account.
            data (Leaf, Branch): The account's state. Optional. Defaults
                to an empty `Branch`.
        """
        if data is None:
            data = Branch()
        elif not isinstance(data, (Leaf, Branch)):
            raise TypeError(
                'Account: data must be a Leaf or Branch, got '
                + str(type(data)))
        self.name = name
        self.data = data

    @classmethod
    def new_root(cls):
        """ Returns an empty branch account named "root". """
        return cls(ROOT_NAME, Branch())

    @classmethod
    def leaf(cls, name, max=0, balance=0):
        """ Convenience constructor for leaf accounts. """
        # pylint: disable=redefined-builtin
        return cls(name, Leaf(balance=balance, max=max))

    @classmethod
    def branch(cls, name):
        """ Convenience constructor for (empty) branch accounts. """
        return cls(name, Branch())

    def is_leaf(self):
        """ Returns True if the account is a leaf account. """
        return isinstance(self.data, Leaf)

    def is_branch(self):
        """ Returns True if the account is a branch account. """
        return isinstance(self.data, Branch)

    @property
    def children(self):
        """ The `BranchEntry` children of a branch (empty for leaves). """
        if isinstance(self.data, Branch):
            return self.data.children
        return []

    def balance(self):
        """ The balance of a leaf, or the sum of a branch's balances. """
        if isinstance(self.data, Leaf):
            return self.data.balance
        return sum(
            (entry.account.balance() for entry in self.data.children),
            Money(0))

    def max(self):
        """ The capacity of a leaf, or the sum of a branch's capacities. """
        if isinstance(self.data, Leaf):
            return self.data.max
        return sum(
            (entry.account.max() for entry in self.data.children),
            Money(0))

    def until_max(self):
        """ The room left before the account reaches its capacity.

        For a branch this is the sum of its children's `until_max`,
        which is the same as its capacity less its balance. It can be
        negative if the account has been filled past capacity.
        """
        return self.max() - self.balance()

    def at_max(self):
        """ Returns True if the account has no room left. """
        return self.until_max() <= 0

    def withdraw(self, amount):
        """ Removes `amount` from a leaf account's balance.

        The balance isn't checked; it may become negative.

        Raises:
            InvalidOperationError: The account is a branch.
        """
        if not isinstance(self.data, Leaf):
            raise InvalidOperationError(
                'Cannot withdraw from a branch (' + repr(self.name) + ')')
        self.data.balance = self.data.balance - as_money(amount)

    def add_child(self, account, inflow):
        """ Attaches `account` as the last child of this branch.

        Args:
            account (Account): The new child.
            inflow (Fixed, Flex): The child's allocation policy.

        Raises:
            InvalidTargetError: This account is a leaf.
        """
        if not isinstance(inflow, INFLOW_TYPES):
            raise TypeError(
                'Account: inflow must be Fixed or Flex, got '
                + str(type(inflow)))
        if not isinstance(self.data, Branch):
            raise InvalidTargetError(
                'Cannot add a child to a leaf account ('
                + repr(self.name) + ')')
        self.data.children.append(BranchEntry(account, inflow))

    def find(self, name):
        """ Finds the first account named `name` (see `navigator.find`) """
        # Avoid a circular import; the navigator walks `Account`s.
        # pylint: disable=import-outside-toplevel
        from budget_tree.accounts.navigator import find
        return find(self, name)

    def __str__(self):
        # pylint: disable=import-outside-toplevel
        from budget_tree.render import render
        return render(self)

    def __repr__(self):
        if isinstance(self.data, Leaf):
            return (
                'Account(' + repr(self.name) + ', balance='
                + str(self.data.balance.amount) + ', max='
                + str(self.data.max.amount) + ')')
        return (
            'Account(' + repr(self.name) + ', children='
            + str(len(self.data.children)) + ')')
