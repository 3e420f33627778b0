"""
Argument name introspection and positional binding tests.
"""
import functools
import unittest
from unittest import TestCase

from cmdtree.binding import bind, parameters, takes_context
from cmdtree.nodes import Leaf
from cmdtree.sentinel import absent


class TestParameters(TestCase):

    def testContextSlotIsSkipped(self):
        def deploy(context, env, region):
            pass

        self.assertEqual(parameters(deploy), ("env", "region"))

    def testZeroArguments(self):
        def ping(context):
            pass

        self.assertEqual(parameters(ping), ())
        self.assertEqual(parameters(lambda: None), ())

    def testDeclarationOrderIsKept(self):
        def tool(context, zeta, alpha, /, mid):
            pass

        self.assertEqual(parameters(tool), ("zeta", "alpha", "mid"))

    def testVariadicAndKeywordOnlyAreNotArguments(self):
        def tool(context, env, *rest, force=False, **options):
            pass

        self.assertEqual(parameters(tool), ("env",))

    def testBoundMethodContextSlot(self):
        class Service:
            def deploy(self, context, env):
                pass

        self.assertEqual(parameters(Service().deploy), ("env",))

    def testExplicitParamsWin(self):
        def deploy(context, *values):
            pass

        self.assertEqual(parameters(Leaf(deploy, params=("env", "region"))), ("env", "region"))

    def testLeafWithoutParamsIsInspected(self):
        def deploy(context, envName):
            pass

        self.assertEqual(parameters(Leaf(deploy)), ("envName",))

    def testPartialIsInspected(self):
        def deploy(service, context, env):
            pass

        self.assertEqual(parameters(functools.partial(deploy, object())), ("env",))

    def testNotCallableRaises(self):
        with self.assertRaises(TypeError):
            parameters("deploy")


class TestTakesContext(TestCase):

    def testPositionalSlot(self):
        self.assertTrue(takes_context(lambda context: None))
        self.assertTrue(takes_context(lambda context, env: None))

    def testVariadicSlot(self):
        self.assertTrue(takes_context(lambda *values: None))

    def testNoSlot(self):
        self.assertFalse(takes_context(lambda: None))
        self.assertFalse(takes_context(lambda *, force=False: None))

    def testLeafIsInspected(self):
        self.assertFalse(takes_context(Leaf(lambda: None)))


class TestBind(TestCase):

    def testMissingValuesAreAbsent(self):
        self.assertEqual(bind(["a", "b"], ["x"]), {"a": "x", "b": absent})
        self.assertIs(bind(["a", "b"], ["x"])["b"], absent)

    def testExtraValuesAreDropped(self):
        self.assertEqual(bind([], ["x", "y"]), {})
        self.assertEqual(bind(["a"], ["x", "y"]), {"a": "x"})

    def testEmptyStringIsKept(self):
        bound = bind(["a", "b"], ["", "y"])
        self.assertEqual(bound["a"], "")
        self.assertIsNot(bound["a"], absent)

    def testOrderFollowsNames(self):
        self.assertEqual(list(bind(("b", "a"), ("1", "2")).items()), [("b", "1"), ("a", "2")])

    def testAcceptsIterables(self):
        self.assertEqual(bind(iter(["a"]), iter(["x"])), {"a": "x"})


if __name__ == "__main__":
    unittest.main()
