import unittest
from abckey.enharmonic import gap_respelling, respell, transpose_note
from abckey.errors import InvalidArgumentError
from abckey.notation import Accidental

N, S, F = Accidental.NATURAL, Accidental.SHARP, Accidental.FLAT


class TestRespell(unittest.TestCase):
    def test_sharp_to_flat_side(self):
        self.assertEqual(respell("D", S), ("E", F))
        self.assertEqual(respell("G", S), ("A", F))
        self.assertEqual(respell("E", S), ("F", N))

    def test_flat_to_sharp_side(self):
        self.assertEqual(respell("D", F), ("C", S))
        self.assertEqual(respell("F", F), ("E", N))
        self.assertEqual(respell("C", F), ("B", N))

    def test_gap_respelling(self):
        self.assertEqual(gap_respelling("B", N), ("C", F))
        self.assertEqual(gap_respelling("F", N), ("E", S))
        self.assertIsNone(gap_respelling("D", N))


class TestTransposeNote(unittest.TestCase):
    def test_naturals(self):
        self.assertEqual(transpose_note("G", N, 2), ("A", N))
        self.assertEqual(transpose_note("C", N, -1), ("B", N))
        self.assertEqual(transpose_note("A", N, 12), ("A", N))

    def test_flat_source_stays_flat(self):
        self.assertEqual(transpose_note("B", F, 2), ("C", N))
        self.assertEqual(transpose_note("D", F, 2), ("E", F))
        self.assertEqual(transpose_note("A", F, 2), ("B", F))
        self.assertEqual(transpose_note("E", F, -12), ("E", F))

    def test_sharp_source_stays_sharp(self):
        self.assertEqual(transpose_note("F", S, 4), ("A", S))
        self.assertEqual(transpose_note("C", S, 5), ("F", S))

    def test_never_double(self):
        for letter in "CDEFGAB":
            for acc in (F, N, S):
                for n in range(-11, 12):
                    with self.subTest(note=letter, acc=acc, n=n):
                        _, moved = transpose_note(letter, acc, n)
                        self.assertIn(moved, (F, N, S))

    def test_invalid_letter(self):
        with self.assertRaises(InvalidArgumentError):
            transpose_note("H", N, 1)


if __name__ == "__main__":
    unittest.main()
