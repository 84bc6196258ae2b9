""" A package for providing actions and applying them to a tree. """

# See budget_tree.__init__.py for version, author, and licensing info.

__all__ = ['base', 'engine']

from budget_tree.actions.base import (
    New, Withdraw, Deposit, Transfer, ACTION_TYPES)
from budget_tree.actions.engine import ActionEngine, apply
