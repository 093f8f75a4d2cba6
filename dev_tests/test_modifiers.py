import os
import sys
import unittest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from pattern_tries import Modifiers, PairedMapping, DEFAULT_PLURALS
from pattern_tries.modifiers import identity


class TestModifiers(unittest.TestCase):
    def setUp(self):
        self.modifiers = Modifiers()

    def test_builtin_transforms(self):
        self.assertEqual(self.modifiers.transform("upper", "ferries"), "FERRIES")
        self.assertEqual(self.modifiers.transform("lower", "Ferries"), "ferries")
        self.assertEqual(self.modifiers.transform("capitalize", "ferries"), "Ferries")
        self.assertEqual(self.modifiers.transform("title", "red buses"), "Red Buses")

    def test_unknown_name_is_identity(self):
        self.assertEqual(self.modifiers.transform("reverse", "buses"), "buses")
        self.assertIs(self.modifiers.get("reverse"), identity)
        self.assertNotIn("reverse", self.modifiers)

    def test_string_methods_are_not_delegated(self):
        # Only registered names apply, not arbitrary str methods.
        self.assertEqual(self.modifiers.transform("zfill", "7"), "7")

    def test_register(self):
        self.modifiers.register("reverse", lambda s: s[::-1])
        self.assertEqual(self.modifiers.transform("reverse", "buses"), "sesub")

        @self.modifiers.register("shout")
        def shout(value):
            return value.upper() + "!"

        self.assertEqual(self.modifiers.transform("shout", "cars"), "CARS!")
        self.assertIn("shout", self.modifiers)

    def test_instances_do_not_share_registrations(self):
        self.modifiers.register("reverse", lambda s: s[::-1])
        self.assertNotIn("reverse", Modifiers())

    def test_constructor_overrides(self):
        m = Modifiers({"upper": lambda s: s})
        self.assertEqual(m.transform("upper", "car"), "car")

    def test_with_paired_mapping(self):
        plurals = PairedMapping(DEFAULT_PLURALS)
        self.assertEqual(self.modifiers.transform("upper", plurals.value_for("ferry")), "FERRIES")


if __name__ == "__main__":
    unittest.main(verbosity=2)
