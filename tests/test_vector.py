import unittest

from rvisa.extensions import CATALOG, ExtensionKind
from rvisa.model import VectorInfo
from rvisa.parser import infer_vector, parse_isa


def _lookup(*names):
    return tuple(CATALOG.lookup(n) for n in names)


class TestInferVector(unittest.TestCase):
    """Test vector capability inference."""

    def test_nothing_vector_related(self):
        self.assertIsNone(infer_vector(_lookup("zba"), _lookup("i", "m")))

    def test_v_without_markers(self):
        """V alone enables vectors without a known length."""
        info = infer_vector((), _lookup("i", "v"))
        self.assertEqual(info, VectorInfo(enabled=True, min_vlen=None, elen=64))

    def test_largest_marker(self):
        info = infer_vector(_lookup("zvl64b", "zvl512b", "zvl128b"), _lookup("v"))
        self.assertEqual(info.min_vlen, 512)

    def test_markers_without_v_or_zve(self):
        """A length marker alone does not enable vectors."""
        self.assertIsNone(infer_vector(_lookup("zvl128b"), _lookup("i")))

    def test_zve32_elen(self):
        info = infer_vector(_lookup("zve32x", "zvl64b"), _lookup("i"))
        self.assertTrue(info.enabled)
        self.assertEqual(info.elen, 32)
        self.assertEqual(info.min_vlen, 64)

    def test_zve64_elen(self):
        info = infer_vector(_lookup("zve32f", "zve64d"), _lookup("i"))
        self.assertEqual(info.elen, 64)

    def test_large_marker(self):
        info = parse_isa("rv64gcv_zvl65536b").vector
        self.assertEqual(info.min_vlen, 65536)

    def test_unregistered_marker_ignored(self):
        """Lengths not in the catalog are unknown names and are skipped."""
        info = parse_isa("rv64gcv_zvl100b").vector
        self.assertIsNone(info.min_vlen)

    def test_vector_letter_in_parse(self):
        parsed = parse_isa("rv64imafdcv")
        self.assertIn("V", parsed.names(ExtensionKind.STANDARD))
        self.assertTrue(parsed.vector.enabled)


if __name__ == '__main__':
    unittest.main()
