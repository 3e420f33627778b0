"""
Utility helpers tests (Unset, coalesce, humanize, pad).
"""
import unittest
from unittest import TestCase

from rich.text import Text

from cmdtree.utils import Unset, UnsetType, coalesce, humanize, pad


class TestUnset(TestCase):

    def testSingletonAndFalsy(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testUnion(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("name", Unset | str)

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Unset", (UnsetType,), {})


class TestCoalesce(TestCase):

    def testReplacesUnsetOnly(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertEqual(coalesce(0, 1), 0)


class TestHumanize(TestCase):

    def testNamingStyles(self):
        self.assertEqual(humanize("envName"), "env name")
        self.assertEqual(humanize("env_name"), "env name")
        self.assertEqual(humanize("--dry-run"), "dry run")
        self.assertEqual(humanize("HTTPPort"), "http port")
        self.assertEqual(humanize("region"), "region")
        self.assertEqual(humanize("api2Key"), "api2 key")

    def testSeparatorsCollapse(self):
        self.assertEqual(humanize("__env__name__"), "env name")

    def testRejectsNonStrings(self):
        with self.assertRaises(TypeError):
            humanize(42)


class TestPad(TestCase):

    def testString(self):
        self.assertEqual(pad("ping", 8), "ping    ")
        self.assertEqual(pad("a longer label", 4), "a longer label")

    def testText(self):
        text = Text("ping", "bold")
        padded = pad(text, 8)
        self.assertIsInstance(padded, Text)
        self.assertEqual(padded.plain, "ping    ")
        self.assertEqual(text.plain, "ping")

    def testRejectsOtherTypes(self):
        with self.assertRaises(TypeError):
            pad(42, 8)


if __name__ == "__main__":
    unittest.main()
