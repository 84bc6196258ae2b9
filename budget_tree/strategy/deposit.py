""" Provides the algorithm for dividing deposits among accounts.

Money deposited to a branch account is divided among its children in
three passes:

1.  `Fixed` children each take up to their fixed amount, in order,
    without exceeding their capacity.
2.  `Flex` children split the remainder in proportion to their
    weights. Children that reach capacity drop out and the remainder
    is re-split among the rest until either the money is placed or
    every flex child is full ("water-filling").
3.  Anything still left over is spread evenly over *all* children,
    ignoring capacity.

Each child receives its share via a recursive deposit, so the same
rules apply at every level of the tree. Leaf accounts simply add the
amount to their balance.
"""

import logging
from decimal import Decimal
from budget_tree.money import Money, TOLERANCE, as_money, as_weight
from budget_tree.accounts.base import Leaf
from budget_tree.accounts.inflow import Fixed, Flex

logger = logging.getLogger(__name__)

class DepositDistributor:
    """ Deposits money into a budget tree.

    Objects of this type are callable; calling one deposits an amount
    into an account, mutating that account and (for branches) its
    descendants. The entire amount is always consumed: once every child
    is at capacity, the overflow is spread over the children anyway.
    Amounts at or below `tolerance` are considered trivial and are not
    placed. Negative amounts go to the first `Fixed` child of a branch;
    a branch with no `Fixed` children drops them with a warning.

    Examples::

        distributor = DepositDistributor()
        distributor(root, 100)

    Attributes:
        tolerance (Decimal): Pools at or below this amount are
            considered fully placed. This avoids endlessly re-splitting
            fractions of a cent.
    """

    def __init__(self, tolerance=None):
        if tolerance is None:
            tolerance = TOLERANCE
        self.tolerance = as_weight(tolerance)

    def __call__(self, account, amount):
        """ Deposits `amount` into `account`.

        Negative amounts are handled the same way: for branches, the
        first `Fixed` child takes the whole (negative) amount.

        Args:
            account (Account): The account receiving the deposit.
            amount (Money): The amount to deposit.
        """
        amount = as_money(amount)
        if isinstance(account.data, Leaf):
            # Leaves take everything; capacity isn't checked here.
            account.data.balance = account.data.balance + amount
            return

        children = account.data.children
        if not children:
            logger.warning(
                'Deposit of %s to %r not placed: account has no children',
                amount.amount, account.name)
            return

        pool = self.fixed_pass(children, amount)
        pool = self.flex_pass(children, pool)
        self.overflow(account, children, pool)

    def fixed_pass(self, children, pool):
        """ Fills `Fixed` children, in order, up to their fixed amounts.

        Returns:
            Money: The part of `pool` that wasn't placed.
        """
        for entry in children:
            if not isinstance(entry.inflow, Fixed):
                continue
            take = min(entry.inflow.amount, _headroom(entry.account), pool)
            if take != 0:
                logger.debug(
                    'Fixed deposit of %s to %r', take.amount,
                    entry.account.name)
                self(entry.account, take)
                pool = pool - take
        return pool

    def flex_pass(self, children, pool):
        """ Splits `pool` among `Flex` children by weight.

        A child counts as full once it has no more than `tolerance` of
        room left; full children receive nothing. The pool shrinks by
        more than `tolerance` every round, so the loop always ends. If
        a round places no more than that, the remainder is left for
        `overflow`.

        Returns:
            Money: The part of `pool` that wasn't placed.
        """
        total_flex = self._total_flex(children)
        rounds = 0
        while total_flex != 0 and pool.amount > self.tolerance:
            rounds += 1
            per_unit = pool / total_flex
            placed = Decimal(0)
            for entry in children:
                if not isinstance(entry.inflow, Flex):
                    continue
                if self._is_full(entry.account):
                    continue
                take = min(
                    per_unit * entry.inflow.weight,
                    entry.account.until_max(),
                    pool)
                if take > 0:
                    logger.debug(
                        'Flex deposit of %s to %r (round %d)', take.amount,
                        entry.account.name, rounds)
                    self(entry.account, take)
                    pool = pool - take
                    placed += take.amount
            if placed <= self.tolerance:
                logger.debug(
                    'Flex allocation stalled after %d rounds with %s '
                    'unplaced', rounds, pool.amount)
                break
            total_flex = self._total_flex(children)
        return pool

    def overflow(self, account, children, pool):
        """ Spreads `pool` evenly over all children, ignoring capacity. """
        if pool.amount < -self.tolerance:
            # Only `Fixed` children take negative amounts.
            logger.warning(
                'Negative deposit of %s to %r not placed: account has '
                'no fixed children to take it', pool.amount, account.name)
            return
        if pool.amount <= self.tolerance:
            return
        share = pool / len(children)
        if share.amount <= self.tolerance:
            return
        logger.warning(
            'Account %r is full; spreading %s over %d children',
            account.name, pool.amount, len(children))
        for entry in children:
            self(entry.account, share)

    def _is_full(self, account):
        """ Whether `account` has no more than `tolerance` of room. """
        return account.until_max().amount <= self.tolerance

    def _total_flex(self, children):
        """ The total weight of `Flex` children that aren't full. """
        return sum(
            (
                entry.inflow.weight for entry in children
                if isinstance(entry.inflow, Flex)
                and not self._is_full(entry.account)),
            Decimal(0))

def _headroom(account):
    """ `until_max`, but never negative. """
    until_max = account.until_max()
    if until_max < 0:
        return Money(0, until_max.currency)
    return until_max

def deposit(account, amount, tolerance=None):
    """ Deposits `amount` into `account`. See `DepositDistributor`. """
    DepositDistributor(tolerance=tolerance)(account, amount)
