""" A package for providing the accounts of a budget tree. """

# See budget_tree.__init__.py for version, author, and licensing info.

__all__ = [
    'base', 'inflow', 'navigator'
]

from budget_tree.accounts.base import (
    Account, Leaf, Branch, BranchEntry, ROOT_NAME)
from budget_tree.accounts.inflow import (
    Fixed, Flex, INFLOW_TYPES, inflow_from_dict, inflow_to_dict)
from budget_tree.accounts.navigator import find, walk, duplicate_names
