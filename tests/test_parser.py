import unittest
import os
import shutil
import tempfile
from unittest.mock import patch
from abckey.errors import InvalidArgumentError
from abckey.key_signature import KeySignature
from abckey.notation import Accidental, Mode, TokenType
from abckey.parser import main, parse_header_line, parse_key_field

N, S, F = Accidental.NATURAL, Accidental.SHARP, Accidental.FLAT


class TestParseKeyField(unittest.TestCase):
    def test_plain_tonic_is_major(self):
        self.assertEqual(parse_key_field("D"), KeySignature("D", Mode.MAJOR))
        self.assertEqual(parse_key_field(" Bb "), KeySignature("B", F, Mode.MAJOR))

    def test_mode_words(self):
        self.assertEqual(parse_key_field("Dm"), KeySignature("D", Mode.MINOR))
        self.assertEqual(parse_key_field("F#m"), KeySignature("F", S, Mode.MINOR))
        self.assertEqual(parse_key_field("Bbmin"), KeySignature("B", F, Mode.MINOR))
        self.assertEqual(parse_key_field("Ador"), KeySignature("A", Mode.DORIAN))
        self.assertEqual(parse_key_field("E mixolydian"), KeySignature("E", Mode.MIXOLYDIAN))
        self.assertEqual(parse_key_field("GMajor"), KeySignature("G", Mode.MAJOR))

    def test_explicit_accidentals(self):
        key = parse_key_field("Dm ^c")
        self.assertEqual(key.accidental_for("B"), F)
        self.assertEqual(key.accidental_for("C"), S)
        self.assertTrue(key.has_sharps_and_flats())

        # nawa athar: C D Eb F# G Ab B
        key = parse_key_field("Cm ^f =b")
        self.assertEqual(key.accidentals, [N, N, F, S, N, F, N])

        key = parse_key_field("D ^G")
        self.assertEqual(key.accidental_for("G"), S)

    def test_modifiers_are_skipped(self):
        self.assertEqual(parse_key_field("D clef=bass"), KeySignature("D", Mode.MAJOR))
        self.assertEqual(parse_key_field("Am middle=d ^g"),
                         parse_key_field("Am ^g"))

    def test_errors(self):
        for bad in ("", "H", "Dxyz", "D ^h", "D ^^g", "none"):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidArgumentError):
                    parse_key_field(bad)


class TestParseHeaderLine(unittest.TestCase):
    def test_key_line(self):
        self.assertEqual(parse_header_line("K:Gm"), (TokenType.FIELD_KEY, KeySignature("G", Mode.MINOR)))
        self.assertEqual(parse_header_line("K: Ddor"), (TokenType.FIELD_KEY, KeySignature("D", Mode.DORIAN)))

    def test_other_fields(self):
        self.assertEqual(parse_header_line("T: The Kesh "), (TokenType.FIELD_TITLE, "The Kesh"))
        self.assertEqual(parse_header_line("X:1"), (TokenType.FIELD_REFERENCE_NUMBER, "1"))

    def test_unknown(self):
        self.assertEqual(parse_header_line("|:GAB c2|"), (TokenType.UNKNOWN, "|:GAB c2|"))

    def test_bad_key_line_raises(self):
        with self.assertRaises(InvalidArgumentError):
            parse_header_line("K:Q")


class TestMain(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.sample_abc = os.path.join(self.test_dir, "test.abc")
        with open(self.sample_abc, "w") as f:
            f.write("""X:1
T:Test Tune
M:4/4
L:1/4
K:Q
K:Dm ^c
"C" C C G G | "F" A A "C" G2 |
""")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_main_prints_fields(self):
        with patch("sys.argv", ["parser", self.sample_abc]), \
             patch("builtins.print") as mock_print:
            main()
        printed = [" ".join(str(a) for a in c.args) for c in mock_print.call_args_list]
        self.assertTrue(any("FIELD_TITLE" in p and "Test Tune" in p for p in printed))
        self.assertTrue(any("FIELD_KEY" in p and "Dmin" in p for p in printed))
        self.assertTrue(any("Error in 'K:Q'" in p for p in printed))


if __name__ == '__main__':
    unittest.main()
