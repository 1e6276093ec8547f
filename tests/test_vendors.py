import unittest

from rvisa.vendors import VENDORS, get_default_vendor, get_vendor_info, vendor_aliases


class TestVendors(unittest.TestCase):
    """Test vendor banner lookup."""

    def test_default(self):
        self.assertEqual(get_default_vendor(), ("RISC-V", "Architecture Info"))
        self.assertEqual(get_vendor_info("default"), get_default_vendor())

    def test_alias_any_case(self):
        self.assertEqual(get_vendor_info("StarFive"), ("StarFive", "RISC-V by StarFive"))
        self.assertEqual(get_vendor_info("MILK-V"), ("Milk-V", "RISC-V by Milk-V"))

    def test_secondary_aliases(self):
        """Every alias of an entry maps to the same banner."""
        self.assertEqual(get_vendor_info("alibaba"), get_vendor_info("thead"))
        self.assertEqual(get_vendor_info("canaan"), get_vendor_info("kendryte"))

    def test_unknown(self):
        self.assertIsNone(get_vendor_info("intel"))
        self.assertIsNone(get_vendor_info(""))

    def test_primary_aliases(self):
        aliases = vendor_aliases()
        self.assertEqual(aliases[0], "default")
        self.assertIn("spacemit", aliases)
        self.assertNotIn("alibaba", aliases)
        self.assertEqual(len(aliases), len(VENDORS))

    def test_aliases_unique_and_lowercase(self):
        seen = set()
        for aliases, _, _ in VENDORS:
            for alias in aliases:
                self.assertEqual(alias, alias.lower())
                self.assertNotIn(alias, seen)
                seen.add(alias)


if __name__ == '__main__':
    unittest.main()
