""" A package for providing the rules that move money around a tree. """

# See budget_tree.__init__.py for version, author, and licensing info.

__all__ = ['deposit']

from budget_tree.strategy.deposit import DepositDistributor, deposit
