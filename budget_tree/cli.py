""" Command-line interface for applying action scripts to a tree. """

import argparse
import logging
import os
import sys
from budget_tree.accounts.base import Account
from budget_tree.actions.engine import ActionEngine
from budget_tree.errors import BudgetError
from budget_tree.money import Money
from budget_tree.reader import load_tree, save_tree, load_actions
from budget_tree.render import render
from budget_tree.settings import Settings

logger = logging.getLogger(__name__)

def build_parser():
    """ Returns the `argparse` parser for the `budget-tree` command. """
    parser = argparse.ArgumentParser(
        prog='budget-tree',
        description='Apply budget actions to a tree of accounts.')
    parser.add_argument(
        'tree', help='JSON file holding the tree (created if missing).')
    parser.add_argument(
        '-a', '--actions', help='JSON file of actions to apply.')
    parser.add_argument(
        '-s', '--settings', help='JSON settings file.')
    parser.add_argument(
        '--save', action='store_true',
        help='Write the updated tree back to TREE.')
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Log debug output.')
    return parser

def main(argv=None):
    """ Runs the command line interface; returns the exit status. """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    settings = Settings(args.settings)
    # All amounts are created in the configured currency:
    Money.default_currency = settings.currency

    if os.path.exists(args.tree):
        root = load_tree(args.tree)
    else:
        logger.info('%s not found; starting a new tree', args.tree)
        root = Account.new_root()
    engine = ActionEngine.from_settings(settings, root)

    status = 0
    if args.actions is not None:
        try:
            engine.apply_all(load_actions(args.actions))
        except BudgetError as error:
            print('error: ' + error.message, file=sys.stderr)
            status = 1

    print(render(
        engine.root, places=settings.display_places, indent=settings.indent))
    if args.save:
        save_tree(engine.root, args.tree)
    return status

if __name__ == '__main__':
    sys.exit(main())
