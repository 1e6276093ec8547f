import unittest

from rvisa.logos import (
    DEFAULT_LOGO,
    LOGOS,
    SIFIVE_LOGO,
    STYLE_ALIASES,
    get_logo,
    normalize_style,
)
from rvisa.vendors import VENDORS, vendor_aliases


class TestStyles(unittest.TestCase):
    """Test style spellings."""

    def test_aliases(self):
        self.assertEqual(normalize_style("normal"), "normal")
        self.assertEqual(normalize_style("compact"), "small")
        self.assertEqual(normalize_style("off"), "none")
        self.assertEqual(normalize_style("SMALL"), "small")

    def test_unknown_style_is_normal(self):
        self.assertEqual(normalize_style("fancy"), "normal")

    def test_every_alias_maps_to_a_canonical_style(self):
        self.assertEqual(set(STYLE_ALIASES.values()), {"normal", "small", "none"})


class TestGetLogo(unittest.TestCase):
    """Test logo lookup by vendor and style."""

    def test_default(self):
        self.assertEqual(get_logo("default"), DEFAULT_LOGO.strip("\n"))
        self.assertTrue(get_logo("default").endswith("RISC-V Architecture Info"))

    def test_vendor_any_case(self):
        self.assertEqual(get_logo("SiFive"), SIFIVE_LOGO.strip("\n"))

    def test_secondary_alias(self):
        self.assertEqual(get_logo("canaan"), get_logo("kendryte"))
        self.assertIn("RISC-V by Kendryte", get_logo("canaan"))

    def test_unknown_vendor_uses_default(self):
        self.assertEqual(get_logo("intel"), get_logo("default"))

    def test_vendor_without_art_uses_default(self):
        self.assertNotIn("pine64", LOGOS)
        self.assertEqual(get_logo("pine64"), get_logo("default"))

    def test_small(self):
        self.assertEqual(get_logo("default", "small"), "  RISC-V")
        self.assertEqual(get_logo("thead", "compact"), "  T-Head RISC-V")

    def test_none(self):
        self.assertEqual(get_logo("sifive", "none"), "")
        self.assertEqual(get_logo("sifive", "off"), "")

    def test_no_surrounding_blank_lines(self):
        for alias in vendor_aliases():
            logo = get_logo(alias)
            self.assertFalse(logo.startswith("\n"), alias)
            self.assertFalse(logo.endswith("\n"), alias)
            self.assertEqual(len(get_logo(alias, "small").splitlines()), 1, alias)

    def test_art_keys_are_primary_aliases(self):
        primaries = {aliases[0] for aliases, _, _ in VENDORS}
        self.assertLessEqual(set(LOGOS), primaries)


if __name__ == '__main__':
    unittest.main()
