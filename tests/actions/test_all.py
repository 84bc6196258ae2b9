''' Runs all unit tests for the `budget_tree.actions` module. '''

import unittest

if __name__ == '__main__':
    SUITE = unittest.TestLoader().discover(
        './tests/actions', pattern='test_*.py', top_level_dir='.')

    unittest.TextTestRunner().run(SUITE)
