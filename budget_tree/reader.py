""" Reads and writes budget trees and action scripts as JSON.

A tree file holds the root account as a JSON object. Each account has a
`name`; leaves also have `balance` and `max`, branches have `children`.
Every child additionally has an `inflow`, either `{"fixed": amount}`
or `{"flex": weight}`. For example::

    {
      "name": "root",
      "children": [
        {"name": "rent", "inflow": {"fixed": 1200},
         "balance": "0", "max": 1200},
        {"name": "goals", "inflow": {"flex": 1}, "children": []}
      ]
    }

An action script is a JSON object with an `actions` list. Each action
has a `type` (`new`, `withdraw`, `deposit` or `transfer`), the fields
of the corresponding action and, optionally, a `date` in any format
that `dateutil` can parse::

    {"actions": [
      {"type": "deposit", "amount": 2000, "date": "2020-01-31"},
      {"type": "transfer", "from": "goals", "to": "rent", "amount": 50}
    ]}
"""

import datetime
import logging
from dateutil.parser import parse as parse_date
from budget_tree.accounts.base import Account, Leaf, Branch, ROOT_NAME
from budget_tree.accounts.inflow import inflow_from_dict, inflow_to_dict
from budget_tree.actions.base import New, Withdraw, Deposit, Transfer
from budget_tree.utility.value_reader import ValueReader

logger = logging.getLogger(__name__)

def account_from_dict(vals):
    """ Builds an `Account` (and its subtree) from a dict.

    Raises:
        ValueError: `vals` describes neither a leaf nor a branch, or
            one of its children has no valid `inflow`.
    """
    data = _data_from_dict(vals)
    account = Account(str(vals['name']), data)
    for child in vals.get('children', ()):
        if 'inflow' not in child:
            raise ValueError(
                'Child ' + repr(child.get('name')) + ' has no inflow')
        account.add_child(
            account_from_dict(child), inflow_from_dict(child['inflow']))
    return account

def _data_from_dict(vals):
    """ Builds `Leaf` or `Branch` state from a dict. """
    is_branch = 'children' in vals
    is_leaf = 'balance' in vals or 'max' in vals
    if is_branch and is_leaf:
        raise ValueError(
            'Account ' + repr(vals.get('name'))
            + ' has both children and a balance/max')
    if is_leaf:
        return Leaf(balance=vals.get('balance', 0), max=vals.get('max', 0))
    # Accounts with no state at all are treated as empty branches:
    return Branch()

def account_to_dict(account, inflow=None):
    """ The inverse of `account_from_dict`. """
    vals = {'name': account.name}
    if inflow is not None:
        vals['inflow'] = inflow_to_dict(inflow)
    if account.is_leaf():
        vals['balance'] = account.data.balance
        vals['max'] = account.data.max
    else:
        vals['children'] = [
            account_to_dict(entry.account, entry.inflow)
            for entry in account.children]
    return vals

def load_tree(filename):
    """ Reads a tree from the JSON file `filename`.

    Raises:
        FileNotFoundError: No such file or directory.
        ValueError: The file doesn't describe a valid tree.
    """
    reader = ValueReader(filename)
    root = account_from_dict(reader.values)
    if root.name != ROOT_NAME or not root.is_branch():
        raise ValueError(
            'The top-level account must be a branch named '
            + repr(ROOT_NAME))
    logger.debug('Loaded tree from %s', filename)
    return root

def save_tree(root, filename):
    """ Writes the tree rooted at `root` to the JSON file `filename`. """
    ValueReader().write(filename, account_to_dict(root))
    logger.debug('Saved tree to %s', filename)

def _date_from_value(value):
    """ Parses a date, defaulting to today if `value` is None. """
    if value is None:
        return datetime.date.today()
    if isinstance(value, datetime.date):
        return value
    return parse_date(str(value)).date()

def action_from_dict(vals):
    """ Builds an action from a dict with a `type` key.

    Raises:
        ValueError: `type` isn't a known action type.
        KeyError: A required field is missing.
    """
    action_type = str(vals.get('type', '')).lower()
    if action_type == 'new':
        data = (
            Leaf(balance=vals.get('balance', 0), max=vals.get('max', 0))
            if 'balance' in vals or 'max' in vals else Branch())
        return New(
            name=str(vals['name']),
            inflow=inflow_from_dict(vals['inflow']),
            parent=str(vals['parent']),
            data=data)
    date = _date_from_value(vals.get('date'))
    if action_type == 'withdraw':
        return Withdraw(str(vals['account']), vals['amount'], date)
    if action_type == 'deposit':
        return Deposit(_optional_name(vals.get('account')), vals['amount'], date)
    if action_type == 'transfer':
        source = vals['from'] if 'from' in vals else vals['source']
        target = vals['to'] if 'to' in vals else vals.get('target')
        return Transfer(
            str(source), _optional_name(target), vals['amount'], date)
    raise ValueError('Unknown action type ' + repr(vals.get('type')))

def _optional_name(name):
    if name is None:
        return None
    return str(name)

def load_actions(filename):
    """ Reads a list of actions from the JSON file `filename`. """
    reader = ValueReader(filename)
    return [action_from_dict(vals) for vals in reader.values.get('actions', [])]
