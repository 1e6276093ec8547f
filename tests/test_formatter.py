import unittest

from rvisa.extensions import ExtensionKind
from rvisa.formatter import (
    SUPPORTED_MARK,
    UNSUPPORTED_MARK,
    align_pairs,
    compact_sections,
    explained_sections,
    flagged_sections,
    format_vector,
    names_line,
)
from rvisa.isa import categorized
from rvisa.model import GroupMode, VectorInfo

ISA = "rv64gc_zba_zbb_sstc"


class TestCompactSections(unittest.TestCase):
    """Test one-line-per-category output."""

    def test_standard_label(self):
        sections = compact_sections(categorized(ISA, ExtensionKind.STANDARD))
        self.assertEqual(sections, [("Ext", ("I M A F D C",))])

    def test_z_labels(self):
        sections = compact_sections(categorized(ISA, ExtensionKind.Z))
        self.assertEqual([s.label for s in sections], ["Z-Base", "Z-Bit Manipulation"])
        self.assertEqual(sections[1].items, ("Zba Zbb",))

    def test_s_labels(self):
        sections = compact_sections(categorized(ISA, ExtensionKind.S))
        self.assertEqual(sections, [("S-Supervisor", ("Sstc",))])

    def test_all_mode_skips_unsupported(self):
        """Compact output lists supported names only, even in All mode."""
        sections = compact_sections(categorized(ISA, ExtensionKind.Z, GroupMode.ALL))
        self.assertEqual(len(sections), 2)

    def test_empty(self):
        self.assertEqual(compact_sections(categorized("", ExtensionKind.Z)), [])


class TestExplainedSections(unittest.TestCase):
    """Test name and description sections."""

    def test_standard(self):
        sections = explained_sections(categorized("rv64ic", ExtensionKind.STANDARD))
        self.assertEqual(len(sections), 1)
        label, pairs = sections[0]
        self.assertEqual(label, "Extensions")
        self.assertEqual(pairs, (("I", "Base Integer Instructions"), ("C", "Compressed (16-bit)")))

    def test_z_label(self):
        sections = explained_sections(categorized(ISA, ExtensionKind.Z))
        self.assertEqual(sections[1].label, "Z-Extensions (Bit Manipulation)")
        self.assertEqual(sections[1].items[0], ("Zba", "Address Generation"))

    def test_s_label(self):
        sections = explained_sections(categorized(ISA, ExtensionKind.S))
        self.assertEqual(sections[0].label, "S-Extensions (Supervisor)")


class TestFlaggedSections(unittest.TestCase):
    """Test every-extension sections with support marks."""

    def test_marks(self):
        sections = flagged_sections(categorized(ISA, ExtensionKind.STANDARD, GroupMode.ALL))
        items = {name: mark for mark, name, _ in sections[0].items}
        self.assertEqual(items["I"], SUPPORTED_MARK)
        self.assertEqual(items["V"], UNSUPPORTED_MARK)

    def test_every_category_listed(self):
        sections = flagged_sections(categorized(ISA, ExtensionKind.Z, GroupMode.ALL))
        self.assertEqual(len(sections), 14)
        self.assertEqual(sections[0].label, "Z-Extensions (Base)")

    def test_without_description(self):
        sections = flagged_sections(
            categorized(ISA, ExtensionKind.S, GroupMode.ALL),
            with_description=False,
        )
        for section in sections:
            for _, _, desc in section.items:
                self.assertIsNone(desc)

    def test_marks_are_check_and_cross(self):
        self.assertEqual(SUPPORTED_MARK, "✓")
        self.assertEqual(UNSUPPORTED_MARK, "✗")


class TestHelpers(unittest.TestCase):

    def test_align_pairs_minimum_width(self):
        lines = align_pairs([("I", "Base"), ("M", "Multiply")])
        self.assertEqual(lines, ["I          Base", "M          Multiply"])

    def test_align_pairs_long_names(self):
        """A name longer than the minimum widens the whole column."""
        lines = align_pairs([("Zihintpause", "Pause Hint"), ("Zba", "Address")])
        self.assertEqual(lines[0], "Zihintpause Pause Hint")
        self.assertEqual(lines[1], "Zba         Address")

    def test_align_pairs_empty(self):
        self.assertEqual(align_pairs([]), [])

    def test_names_line(self):
        self.assertEqual(names_line(["I", "M"]), "I M")
        self.assertEqual(names_line([]), "")


class TestFormatVector(unittest.TestCase):

    def test_none(self):
        self.assertIsNone(format_vector(None))

    def test_disabled(self):
        self.assertIsNone(format_vector(VectorInfo(enabled=False)))

    def test_enabled_without_length(self):
        self.assertEqual(format_vector(VectorInfo()), "Enabled")

    def test_enabled_with_length(self):
        self.assertEqual(format_vector(VectorInfo(min_vlen=128)), "Enabled, VLEN>=128")


if __name__ == '__main__':
    unittest.main()
