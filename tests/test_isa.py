import unittest

from rvisa.extensions import ExtensionKind, ZCategory
from rvisa.isa import categorized, explain, parse_compact, parse_s, parse_vector, parse_z
from rvisa.model import GroupMode

VISIONFIVE2 = "rv64imafdc_zicntr_zicsr_zifencei_zihpm_zba_zbb"
SPACEMIT_K1 = (
    "rv64imafdcv_zicbom_zicboz_zicntr_zicsr_zifencei_zihintpause_"
    "zihpm_zba_zbb_zbc_zbs_zkt_zvkt_zvl128b_zvl256b_zvl32b_zvl64b"
)


class TestParseCompact(unittest.TestCase):
    """Test the standard extension summary line."""

    def test_explicit_letters(self):
        self.assertEqual(parse_compact("rv64imafdc"), "I M A F D C")

    def test_g_matches_explicit_letters(self):
        """rv64gc and rv64imafdc describe the same standard set."""
        self.assertEqual(parse_compact("rv64gc"), parse_compact("rv64imafdc"))

    def test_embedded(self):
        self.assertEqual(parse_compact("rv32e"), "E")
        self.assertEqual(parse_compact("rv32ec"), "E C")

    def test_e_wins_over_i(self):
        self.assertEqual(parse_compact("rv32ei"), "E")

    def test_vector_letter(self):
        self.assertEqual(parse_compact("rv64imafdcv"), "I M A F D C V")

    def test_empty(self):
        self.assertEqual(parse_compact(""), "")

    def test_idempotent(self):
        self.assertEqual(parse_compact(SPACEMIT_K1), parse_compact(SPACEMIT_K1))


class TestParseZAndS(unittest.TestCase):
    """Test the Z and S extension summary lines."""

    def test_g_implies_zicsr_zifencei(self):
        self.assertEqual(parse_z("rv64gc"), "zicsr zifencei")

    def test_mixed_case_suffix(self):
        self.assertEqual(parse_z("rv64i_Zicsr"), "zicsr")

    def test_no_suffixes(self):
        self.assertEqual(parse_z("rv64imafdc"), "")
        self.assertEqual(parse_s("rv64imafdc"), "")

    def test_unknown_suffix_dropped(self):
        self.assertEqual(parse_z("rv64imac_zzzfake_zba"), "zba")

    def test_visionfive2(self):
        self.assertEqual(
            parse_z(VISIONFIVE2),
            "zicntr zicsr zifencei zihpm zba zbb",
        )

    def test_s_separate_from_z(self):
        isa = "rv64imac_zba_sstc_svinval"
        self.assertEqual(parse_z(isa), "zba")
        self.assertEqual(parse_s(isa), "sstc svinval")

    def test_empty(self):
        self.assertEqual(parse_z(""), "")
        self.assertEqual(parse_s(""), "")


class TestParseVector(unittest.TestCase):
    """Test the vector summary."""

    def test_v_enabled(self):
        self.assertEqual(parse_vector("rv64imafdcv"), "Enabled")

    def test_no_vector(self):
        self.assertIsNone(parse_vector("rv64imafdc"))

    def test_largest_vlen_wins(self):
        """Marker order does not matter, the largest length is reported."""
        self.assertEqual(parse_vector("rv64imafdcv_zvl128b_zvl256b"), "Enabled, VLEN>=256")
        self.assertEqual(parse_vector("rv64imafdcv_zvl256b_zvl128b"), "Enabled, VLEN>=256")

    def test_zve_without_v(self):
        self.assertEqual(parse_vector("rv64imac_zve32x"), "Enabled")

    def test_spacemit_k1(self):
        self.assertEqual(parse_vector(SPACEMIT_K1), "Enabled, VLEN>=256")

    def test_empty(self):
        self.assertIsNone(parse_vector(""))


class TestExplain(unittest.TestCase):
    """Test (name, description) pairs."""

    def test_standard_pairs(self):
        pairs = explain("rv64imac")
        self.assertEqual([name for name, _ in pairs], ["I", "M", "A", "C"])
        self.assertEqual(pairs[0], ("I", "Base Integer Instructions"))

    def test_z_pairs_in_input_order(self):
        pairs = explain("rv64i_zbb_zba", ExtensionKind.Z)
        self.assertEqual(pairs, [
            ("Zbb", "Basic Bit Manipulation"),
            ("Zba", "Address Generation"),
        ])

    def test_s_pairs(self):
        self.assertEqual(explain("rv64i_sstc", ExtensionKind.S), [("Sstc", "Supervisor Timer")])

    def test_empty(self):
        self.assertEqual(explain(""), [])
        self.assertEqual(explain("", ExtensionKind.Z), [])


class TestCategorized(unittest.TestCase):
    """Test grouping through the string interface."""

    def test_present_mode(self):
        view = categorized(VISIONFIVE2, ExtensionKind.Z)
        self.assertEqual(view.mode, GroupMode.PRESENT)
        self.assertEqual([g.category for g in view], [ZCategory.BASE, ZCategory.BIT])

    def test_all_mode(self):
        view = categorized(VISIONFIVE2, ExtensionKind.Z, GroupMode.ALL)
        self.assertEqual(len(view), 14)
        supported = [e.descriptor.name for e in view.entries() if e.supported]
        self.assertEqual(supported, ["Zicsr", "Zifencei", "Zicntr", "Zihpm", "Zba", "Zbb"])


if __name__ == '__main__':
    unittest.main()
