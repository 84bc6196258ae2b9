""" Name-based lookup and traversal of a budget tree.

Accounts are addressed by name alone (there is no path syntax), so the
whole tree is searched. Where names are duplicated, the first match in
pre-order is returned.
"""

from collections import Counter
from budget_tree.accounts.base import Branch

def find(account, name):
    """ Finds the first account named `name` in `account`'s subtree.

    The search is depth-first and pre-order, visiting children in the
    order they were added. Each child's name is tested before
    descending into that child's subtree, and before moving on to the
    next sibling.

    Args:
        account (Account): The root of the subtree to search.
        name (str): The exact name of the account to find.

    Returns:
        Account: The first match, or None if there is no match.
    """
    if account.name == name:
        return account
    if not isinstance(account.data, Branch):
        return None
    for entry in account.data.children:
        if entry.account.name == name:
            return entry.account
        found = find(entry.account, name)
        if found is not None:
            return found
    return None

def walk(account, depth=0):
    """ Yields `(depth, account)` pairs for a subtree, in pre-order.

    This is the order in which accounts are rendered. `account` itself
    is yielded first, at `depth`.
    """
    yield depth, account
    if isinstance(account.data, Branch):
        for entry in account.data.children:
            yield from walk(entry.account, depth + 1)

def duplicate_names(account):
    """ Returns the set of names used by more than one account. """
    counts = Counter(node.name for _, node in walk(account))
    return {name for name, count in counts.items() if count > 1}
