"""Unit tests for non-ASCII variable aliasing."""

import unittest

from linecalc_pkg.aliasing import AliasTable, needs_alias


class TestNeedsAlias(unittest.TestCase):
    def test_ascii_names_pass(self):
        self.assertFalse(needs_alias("total"))
        self.assertFalse(needs_alias("_v0"))
        self.assertFalse(needs_alias("pi"))

    def test_non_ascii_names(self):
        self.assertTrue(needs_alias("房租"))
        self.assertTrue(needs_alias("café"))
        self.assertTrue(needs_alias("x²"))


class TestAliasTable(unittest.TestCase):
    """Test alias allocation and substitution within one pass."""

    def test_allocates_sequential_names(self):
        table = AliasTable()
        self.assertEqual(table.alias_for("房租"), "_v0")
        self.assertEqual(table.alias_for("水电"), "_v1")
        self.assertEqual(table.counter, 2)

    def test_alias_is_stable(self):
        table = AliasTable()
        first = table.alias_for("房租")
        table.alias_for("水电")
        self.assertEqual(table.alias_for("房租"), first)
        self.assertEqual(len(table), 2)

    def test_distinct_names_never_collide(self):
        table = AliasTable()
        names = [f"变量{i}" for i in range(100)]
        aliases = {table.alias_for(name) for name in names}
        self.assertEqual(len(aliases), 100)

    def test_contains(self):
        table = AliasTable()
        self.assertNotIn("房租", table)
        table.alias_for("房租")
        self.assertIn("房租", table)

    def test_substitute_replaces_only_non_ascii(self):
        table = AliasTable()
        self.assertEqual(table.substitute("房租 + 水电"), "_v0 + _v1")
        self.assertEqual(table.substitute("sqrt(x) + pi"), "sqrt(x) + pi")

    def test_substitute_shares_counter_across_lines(self):
        table = AliasTable()
        self.assertEqual(table.substitute("房租 = 3500"), "_v0 = 3500")
        self.assertEqual(table.substitute("水电 = 200"), "_v1 = 200")
        self.assertEqual(table.substitute("房租 + 水电"), "_v0 + _v1")

    def test_whole_identifier_is_aliased(self):
        table = AliasTable()
        self.assertEqual(table.substitute("单价2 * 3"), "_v0 * 3")
        self.assertEqual(table.substitute("price单价"), "_v1")


if __name__ == "__main__":
    unittest.main()
