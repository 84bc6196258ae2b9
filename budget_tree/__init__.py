""" A package for distributing money through a tree of budget accounts. """

__all__ = [
    'accounts', 'actions', 'errors', 'money', 'reader', 'render',
    'settings', 'strategy'
]

__version__ = '0.1.0'
__author__ = 'Christopher Scott'
__copyright__ = 'Copyright (C) 2019 Christopher Scott'
__license__ = 'All rights reserved'

from budget_tree.money import Money, TOLERANCE
from budget_tree.errors import (
    ErrorKind, BudgetError, NotFoundError, InvalidOperationError,
    InvalidTargetError)
from budget_tree.accounts import (
    Account, Leaf, Branch, BranchEntry, Fixed, Flex, ROOT_NAME,
    find, walk, duplicate_names)
from budget_tree.strategy import DepositDistributor, deposit
from budget_tree.actions import (
    New, Withdraw, Deposit, Transfer, ActionEngine, apply)
from budget_tree.settings import Settings
from budget_tree.render import render
from budget_tree.reader import (
    load_tree, save_tree, load_actions, account_from_dict, account_to_dict,
    action_from_dict)
