from django.test import SimpleTestCase

from console.compressed_ids import cid_or_id, from_cid, split_id, to_cid


class CompressedIdTests(SimpleTestCase):
    def test_region_ids_are_compressed(self):
        self.assertEqual(to_cid(1_000_000_000_012), "1r12")
        self.assertEqual(to_cid(99_000_000_000_001), "99r1")

    def test_region_zero_ids_stay_plain(self):
        self.assertEqual(to_cid(12), "12")
        self.assertEqual(to_cid("12"), "12")

    def test_blank_ids(self):
        self.assertIsNone(to_cid(None))
        self.assertIsNone(to_cid(""))

    def test_already_compressed_passes_through(self):
        self.assertEqual(to_cid("1r12"), "1r12")

    def test_from_cid(self):
        self.assertEqual(from_cid("1r12"), 1_000_000_000_012)
        self.assertEqual(from_cid("12"), 12)
        self.assertEqual(from_cid(7), 7)
        self.assertIsNone(from_cid("abc"))
        self.assertIsNone(from_cid(None))

    def test_split_id(self):
        self.assertEqual(split_id(2_000_000_000_005), (2, 5))

    def test_cid_or_id(self):
        self.assertTrue(cid_or_id("12"))
        self.assertTrue(cid_or_id("1r12"))
        self.assertFalse(cid_or_id("r12"))
        self.assertFalse(cid_or_id(None))
