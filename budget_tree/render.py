""" Renders a budget tree as indented text.

Each account is shown on its own line as `name: balance`, indented once
per level of depth, in the same pre-order used to look up names.
"""

from decimal import Decimal
from budget_tree.accounts.navigator import walk

def render_lines(account, places=2, indent='  '):
    """ Yields one rendered line per account in `account`'s subtree. """
    quantum = Decimal(1).scaleb(-places)
    for depth, node in walk(account):
        amount = node.balance().amount.quantize(quantum)
        yield indent * depth + node.name + ': ' + str(amount)

def render(account, places=2, indent='  '):
    """ Renders `account`'s subtree as a multi-line string. """
    return '\n'.join(render_lines(account, places=places, indent=indent))
