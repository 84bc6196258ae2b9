""" Unit tests for `Account`. """

import unittest
from budget_tree import (
    Account, Leaf, Branch, Fixed, Flex, Money, ErrorKind,
    InvalidOperationError, InvalidTargetError)
from tests.util import TestCaseBudget, add_leaf, add_branch

class TestAccountMethods(TestCaseBudget):
    """ Tests the basic queries and mutations of `Account`. """

    def setUp(self):
        """ Builds a small tree for testing.

        root
          bills (fixed 100)
            rent (fixed 60, max 60, balance 60)
            phone (flex 1, max 40, balance 10)
          savings (flex 1, max 1000, balance 200)
        """
        self.root = Account.new_root()
        self.bills = add_branch(self.root, 'bills', Fixed(100))
        self.rent = add_leaf(self.bills, 'rent', Fixed(60), max=60, balance=60)
        self.phone = add_leaf(self.bills, 'phone', Flex(1), max=40, balance=10)
        self.savings = add_leaf(
            self.root, 'savings', Flex(1), max=1000, balance=200)

    def test_new_root(self):
        """ The root is an empty branch named "root". """
        root = Account.new_root()
        self.assertEqual(root.name, 'root')
        self.assertTrue(root.is_branch())
        self.assertEqual(root.children, [])
        self.assertEqual(root.balance(), 0)

    def test_init_default(self):
        """ Accounts without data are empty branches. """
        account = Account('test')
        self.assertIsInstance(account.data, Branch)

    def test_init_invalid(self):
        """ Data must be a `Leaf` or `Branch`. """
        with self.assertRaises(TypeError):
            Account('test', 100)

    def test_leaf_converts(self):
        """ Leaf balances and capacities are converted to `Money`. """
        leaf = Leaf(balance=1.5, max='10')
        self.assertIsInstance(leaf.balance, Money)
        self.assertEqual(leaf.balance, Money('1.5'))
        self.assertEqual(leaf.max, Money(10))

    def test_balance_leaf(self):
        """ A leaf's balance is its own. """
        self.assertAlmostEqual(self.phone.balance(), 10)

    def test_balance_branch(self):
        """ A branch's balance is the sum over its subtree. """
        self.assertAlmostEqual(self.bills.balance(), 70)
        self.assertAlmostEqual(self.root.balance(), 270)

    def test_max_branch(self):
        """ A branch's capacity is the sum over its subtree. """
        self.assertAlmostEqual(self.bills.max(), 100)
        self.assertAlmostEqual(self.root.max(), 1100)

    def test_until_max(self):
        """ `until_max` is capacity less balance, summed for branches. """
        self.assertAlmostEqual(self.rent.until_max(), 0)
        self.assertAlmostEqual(self.phone.until_max(), 30)
        self.assertAlmostEqual(self.bills.until_max(), 30)
        self.assertAlmostEqual(self.root.until_max(), 830)

    def test_at_max(self):
        """ Accounts at or over capacity are at max. """
        self.assertTrue(self.rent.at_max())
        self.assertFalse(self.phone.at_max())
        over = Account.leaf('over', max=5, balance=6)
        self.assertTrue(over.at_max())
        self.assertAlmostEqual(over.until_max(), -1)

    def test_withdraw_leaf(self):
        """ Withdrawals aren't limited by the balance. """
        self.phone.withdraw(25)
        self.assertAlmostEqual(self.phone.balance(), -15)

    def test_withdraw_branch(self):
        """ Withdrawing from a branch fails and changes nothing. """
        with self.assertRaises(InvalidOperationError) as context:
            self.bills.withdraw(10)
        self.assertEqual(context.exception.kind, ErrorKind.INVALID_OPERATION)
        self.assertAlmostEqual(self.rent.balance(), 60)
        self.assertAlmostEqual(self.phone.balance(), 10)

    def test_add_child_order(self):
        """ Children are kept in the order they were added. """
        names = [entry.account.name for entry in self.root.children]
        self.assertEqual(names, ['bills', 'savings'])
        add_leaf(self.root, 'fun', Flex(2))
        names = [entry.account.name for entry in self.root.children]
        self.assertEqual(names, ['bills', 'savings', 'fun'])
        self.assertEqual(self.root.children[-1].inflow, Flex(2))

    def test_add_child_to_leaf(self):
        """ Leaves can't have children. """
        with self.assertRaises(InvalidTargetError) as context:
            self.savings.add_child(Account.leaf('child'), Flex(1))
        # InvalidTargetError is a kind of invalid operation:
        self.assertIsInstance(context.exception, InvalidOperationError)
        self.assertEqual(context.exception.kind, ErrorKind.INVALID_TARGET)
        self.assertEqual(self.savings.children, [])

    def test_add_child_bad_inflow(self):
        """ The inflow must be `Fixed` or `Flex`. """
        with self.assertRaises(TypeError):
            self.root.add_child(Account.leaf('child'), 5)

    def test_find(self):
        """ `Account.find` searches the account's subtree. """
        self.assertIs(self.root.find('phone'), self.phone)
        self.assertIsNone(self.savings.find('phone'))

    def test_str(self):
        """ `str` renders the subtree. """
        self.assertEqual(
            str(self.bills), 'bills: 70.00\n  rent: 60.00\n  phone: 10.00')

class TestInflow(unittest.TestCase):
    """ Tests the `Fixed` and `Flex` inflow policies. """

    def test_fixed_converts(self):
        """ Fixed amounts are `Money`. """
        self.assertEqual(Fixed(5).amount, Money(5))

    def test_flex_converts(self):
        """ Flex weights are `Decimal`. """
        self.assertEqual(str(Flex(0.5).weight), '0.5')

    def test_equality(self):
        """ Policies compare by value. """
        self.assertEqual(Fixed(5), Fixed('5'))
        self.assertNotEqual(Fixed(5), Flex(5))

if __name__ == '__main__':
    unittest.main()
