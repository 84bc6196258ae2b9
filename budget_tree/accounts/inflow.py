""" Allocation policies for the children of a branch account.

Each child of a branch is attached with an inflow policy that tells
the deposit distributor how much of an incoming deposit the child
should receive:

* `Fixed` children receive up to a flat amount per deposit, in the
  order that they were added to the branch, before any other child.
* `Flex` children split whatever remains in proportion to their
  weights.

In both cases a child never receives more than it has room for (i.e.
its `until_max`) until every child is full.
"""

from dataclasses import dataclass
from decimal import Decimal
from budget_tree.money import Money, as_money, as_weight

@dataclass(frozen=True)
class Fixed:
    """ Take up to `amount` from each deposit, ahead of flex siblings.

    Attributes:
        amount (Money): The most that the child will receive per
            deposit during the fixed pass.
    """
    amount: Money

    def __post_init__(self):
        # Frozen dataclasses need `object.__setattr__` to convert:
        object.__setattr__(self, 'amount', as_money(self.amount))

@dataclass(frozen=True)
class Flex:
    """ Take a share of each deposit proportional to `weight`.

    Attributes:
        weight (Decimal): The child's weight relative to the weights
            of its (not-yet-full) flex siblings.
    """
    weight: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'weight', as_weight(self.weight))

INFLOW_TYPES = (Fixed, Flex)

def inflow_from_dict(vals):
    """ Builds an inflow policy from a `{"fixed": x}`/`{"flex": w}` dict.

    Raises:
        ValueError: `vals` doesn't name exactly one known policy.
    """
    if not isinstance(vals, dict) or len(vals) != 1:
        raise ValueError(
            'Inflow must be a single-entry dict, got ' + repr(vals))
    (key, value), = vals.items()
    key = str(key).lower()
    if key == 'fixed':
        return Fixed(value)
    if key == 'flex':
        return Flex(value)
    raise ValueError('Unknown inflow type ' + repr(key))

def inflow_to_dict(inflow):
    """ The inverse of `inflow_from_dict`. """
    if isinstance(inflow, Fixed):
        return {'fixed': inflow.amount.amount}
    if isinstance(inflow, Flex):
        return {'flex': inflow.weight}
    raise TypeError(str(type(inflow)) + ' is not a supported inflow type.')
