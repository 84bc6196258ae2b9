""" Applies actions to a budget tree. """

import copy
import logging
from budget_tree.accounts.base import Account
from budget_tree.accounts.navigator import find
from budget_tree.errors import BudgetError, NotFoundError
from budget_tree.strategy.deposit import DepositDistributor
from budget_tree.utility.register import MethodRegister, registered_method_for
from budget_tree.actions.base import New, Withdraw, Deposit, Transfer

logger = logging.getLogger(__name__)

class ActionEngine(MethodRegister):
    """ Owns a budget tree and applies actions to it.

    Actions refer to accounts by name. Each name is looked up with
    `navigator.find`, so the first account with that name (in
    pre-order) is the one affected.

    Errors are raised to the caller immediately and nothing is rolled
    back. In particular, a `Transfer` whose target doesn't exist still
    withdraws from its source (unless `atomic_transfers` is set).

    Examples::

        engine = ActionEngine()
        engine.apply(New('savings', Flex(1), 'root', Leaf(max=1000)))
        engine.apply(Deposit(None, 100))
        engine.balance('savings')  # Money('100')

    Attributes:
        root (Account): The root of the tree.
        distributor (DepositDistributor): Places deposited money.
        atomic_transfers (bool): If True, `Transfer` checks that both
            of its accounts exist before withdrawing anything.
    """

    def __init__(self, root=None, *, tolerance=None, atomic_transfers=False):
        if root is None:
            root = Account.new_root()
        self.root = root
        self.distributor = DepositDistributor(tolerance=tolerance)
        self.atomic_transfers = atomic_transfers

    @classmethod
    def from_settings(cls, settings, root=None):
        """ Builds an engine configured by a `Settings` object. """
        return cls(
            root,
            tolerance=settings.tolerance,
            atomic_transfers=settings.atomic_transfers)

    def apply(self, action):
        """ Applies `action` to the tree.

        Raises:
            NotFoundError: An account named by `action` doesn't exist.
            InvalidOperationError: `action` withdraws from a branch or
                adds a child to a leaf.
            TypeError: `action` isn't a supported action type.
        """
        logger.info('Applying %s', action)
        try:
            self.dispatch(action)
        except BudgetError as error:
            logger.warning('Failed to apply %s: %s', action, error)
            raise

    def apply_all(self, actions):
        """ Applies each of `actions` in order, stopping at any error. """
        for action in actions:
            self.apply(action)

    def balance(self, name=None):
        """ The balance of the account named `name` (default: root). """
        return self.lookup(name).balance()

    def lookup(self, name, purpose=None):
        """ Finds account `name`, or the root if `name` is None.

        Args:
            name (str): The name of the account.
            purpose (str): Describes why the account is needed, for use
                in the error message. Optional.

        Raises:
            NotFoundError: No account is named `name`.
        """
        if name is None:
            return self.root
        account = find(self.root, name)
        if account is None:
            message = 'Could not find account ' + repr(name)
            if purpose is not None:
                message += ' ' + purpose
            raise NotFoundError(name, message)
        return account

    @registered_method_for(New)
    def apply_new(self, action):
        """ Adds a new account under the parent branch. """
        parent = self.lookup(
            action.parent, 'to create account ' + repr(action.name) + ' in')
        # Each application gets its own state, so `New` can be reused:
        data = copy.deepcopy(action.data)
        parent.add_child(Account(action.name, data), action.inflow)

    @registered_method_for(Withdraw)
    def apply_withdraw(self, action):
        """ Withdraws from a leaf account. """
        account = self.lookup(action.account, 'to withdraw from')
        account.withdraw(action.amount)

    @registered_method_for(Deposit)
    def apply_deposit(self, action):
        """ Deposits into an account (or the root). """
        account = self.lookup(action.account, 'to deposit to')
        self.distributor(account, action.amount)

    @registered_method_for(Transfer)
    def apply_transfer(self, action):
        """ Withdraws from one account and deposits into another. """
        if self.atomic_transfers:
            # Resolve both ends before mutating anything:
            self.lookup(action.source, 'to withdraw from')
            self.lookup(action.target, 'to deposit to')
        self.apply_withdraw(
            Withdraw(action.source, action.amount, action.date))
        self.apply_deposit(
            Deposit(action.target, action.amount, action.date))

def apply(root, action, **kwargs):
    """ Applies `action` to the tree rooted at `root`.

    `kwargs` are passed to `ActionEngine`.
    """
    ActionEngine(root, **kwargs).apply(action)
