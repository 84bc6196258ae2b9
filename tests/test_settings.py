""" Unit tests for `Settings`. """

import json
import os
import tempfile
import unittest
from decimal import Decimal
from budget_tree import Settings

class TestSettings(unittest.TestCase):
    """ Tests `Settings`. """

    def test_defaults(self):
        """ Every setting has a default. """
        settings = Settings()
        self.assertEqual(settings.currency, 'CAD')
        self.assertEqual(settings.tolerance, Decimal('0.01'))
        self.assertEqual(settings.display_places, 2)
        self.assertEqual(settings.indent, '  ')
        self.assertFalse(settings.atomic_transfers)

    def test_read(self):
        """ Values in the file override the defaults. """
        with tempfile.TemporaryDirectory() as dirname:
            filename = os.path.join(dirname, 'settings.json')
            with open(filename, 'w', encoding='utf-8') as file:
                json.dump({
                    'currency': 'USD', 'tolerance': 0.5,
                    'atomic_transfers': True, 'unused': 1}, file)
            settings = Settings(filename)
        self.assertEqual(settings.currency, 'USD')
        self.assertEqual(settings.tolerance, Decimal('0.5'))
        self.assertTrue(settings.atomic_transfers)
        # Unspecified values still have defaults:
        self.assertEqual(settings.display_places, 2)
        self.assertEqual(settings.values['unused'], 1)

    def test_int_tolerance(self):
        """ Integer tolerances are converted to Decimal. """
        with tempfile.TemporaryDirectory() as dirname:
            filename = os.path.join(dirname, 'settings.json')
            with open(filename, 'w', encoding='utf-8') as file:
                json.dump({'tolerance': 1}, file)
            settings = Settings(filename)
        self.assertIsInstance(settings.tolerance, Decimal)

    def test_missing_file(self):
        """ Missing settings files raise `FileNotFoundError`. """
        with self.assertRaises(FileNotFoundError):
            Settings('/nonexistent/settings.json')

if __name__ == '__main__':
    unittest.main()
