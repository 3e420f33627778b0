"""
Tree walking tests: leaf path enumeration, congruence verification and path
resolution.
"""
import itertools
import unittest
from unittest import TestCase

from cmdtree.faults import CongruenceError, FaultCode
from cmdtree.nodes import Branch, Leaf, command_tree, help_tree
from cmdtree.trees import Outcome, paths, resolve, verify


def staging(context, env):
    pass


def prod(context, env):
    pass


def ping(context):
    pass


COMMANDS = {"deploy": {"staging": staging, "prod": prod, "cloud": {"aws": prod}}, "ping": ping}
HELP = {
    "deploy": {
        "_": "deployment targets",
        "staging": "deploy to staging",
        "prod": "deploy to prod",
        "cloud": {"_": "cloud providers", "aws": "deploy to aws"},
    },
    "ping": "check connectivity",
}


class TestPaths(TestCase):

    def testLeafPathsOnly(self):
        self.assertEqual(
            list(paths(command_tree(COMMANDS))),
            ["deploy:staging", "deploy:prod", "deploy:cloud:aws", "ping"],
        )

    def testDescriptionsAreNotPaths(self):
        self.assertEqual(
            sorted(paths(help_tree(HELP))),
            ["deploy:cloud:aws", "deploy:prod", "deploy:staging", "ping"],
        )

    def testCustomSeparator(self):
        self.assertEqual(list(paths(command_tree({"a": {"b": ping}}), separator=".")), ["a.b"])

    def testEmptyTree(self):
        self.assertEqual(list(paths(Branch())), [])

    def testRejectsNonBranch(self):
        with self.assertRaises(TypeError):
            paths(Leaf(ping))


class TestVerify(TestCase):

    def testCongruentTreesPass(self):
        verify(command_tree(COMMANDS), help_tree(HELP))

    def testKeyOrderDoesNotMatter(self):
        entries = list(HELP.items())
        for permutation in itertools.permutations(entries):
            verify(command_tree(COMMANDS), help_tree(dict(permutation)))

    def testUndocumentedCommandFails(self):
        commands = {**COMMANDS, "status": ping}
        with self.assertRaises(CongruenceError) as context:
            verify(command_tree(commands), help_tree(HELP))
        self.assertEqual(context.exception.options["undocumented"], ("status",))
        self.assertEqual(context.exception.options["unimplemented"], ())
        self.assertEqual(context.exception.code, FaultCode.INCONGRUENT_TREES)

    def testUnimplementedHelpEntryFails(self):
        help = {**HELP, "status": "show status"}
        with self.assertRaises(CongruenceError) as context:
            verify(command_tree(COMMANDS), help_tree(help))
        self.assertEqual(context.exception.options["unimplemented"], ("status",))
        self.assertIn("unimplemented: status", context.exception.message)

    def testRenamedLeafFailsBothWays(self):
        commands = {"deploy": {"staging": staging}}
        help = {"deploy": {"stage": "deploy to staging"}}
        with self.assertRaises(CongruenceError) as context:
            verify(command_tree(commands), help_tree(help))
        self.assertEqual(context.exception.options["undocumented"], ("deploy:staging",))
        self.assertEqual(context.exception.options["unimplemented"], ("deploy:stage",))

    def testLeafVersusSectionFails(self):
        with self.assertRaises(CongruenceError):
            verify(command_tree({"deploy": staging}), help_tree({"deploy": {"staging": "to staging"}}))

    def testDescriptionNeverAffectsOutcome(self):
        for descr in ("", "changed", "x" * 200):
            help = {**HELP, "deploy": {**HELP["deploy"], "_": descr}}
            verify(command_tree(COMMANDS), help_tree(help))
        help = {**HELP, "deploy": {key: value for key, value in HELP["deploy"].items() if key != "_"}}
        verify(command_tree(COMMANDS), help_tree(help))


class TestResolve(TestCase):

    def setUp(self):
        self.tree = command_tree(COMMANDS)

    def testLeaf(self):
        resolution = resolve("deploy:staging", self.tree)
        self.assertIs(resolution.outcome, Outcome.LEAF)
        self.assertIs(resolution.node.value, staging)

    def testDeepLeafAndTruncations(self):
        resolution = resolve("deploy:cloud:aws", self.tree)
        self.assertIs(resolution.outcome, Outcome.LEAF)
        self.assertIs(resolve("deploy:cloud", self.tree).outcome, Outcome.PARTIAL)
        self.assertIs(resolve("deploy", self.tree).outcome, Outcome.PARTIAL)

    def testPartialReturnsBranch(self):
        resolution = resolve("deploy", self.tree)
        self.assertIs(resolution.node, self.tree.get("deploy"))

    def testSequencePath(self):
        self.assertIs(resolve(("deploy", "prod"), self.tree).node.value, prod)

    def testUnknownSegment(self):
        self.assertIs(resolve("deploy:unknown", self.tree).outcome, Outcome.NOT_FOUND)
        self.assertIs(resolve("unknown:staging", self.tree).outcome, Outcome.NOT_FOUND)
        self.assertIsNone(resolve("unknown", self.tree).node)

    def testEmptySegment(self):
        self.assertIs(resolve("deploy::staging", self.tree).outcome, Outcome.NOT_FOUND)
        self.assertIs(resolve("deploy:", self.tree).outcome, Outcome.NOT_FOUND)
        self.assertIs(resolve(":deploy", self.tree).outcome, Outcome.NOT_FOUND)

    def testBelowLeaf(self):
        self.assertIs(resolve("ping:deeper", self.tree).outcome, Outcome.NOT_FOUND)

    def testEmptyPathRejected(self):
        with self.assertRaises(ValueError):
            resolve("", self.tree)
        with self.assertRaises(ValueError):
            resolve((), self.tree)

    def testResolvesHelpTreeToo(self):
        resolution = resolve("deploy:prod", help_tree(HELP))
        self.assertIs(resolution.outcome, Outcome.LEAF)
        self.assertEqual(resolution.node.value, "deploy to prod")


if __name__ == "__main__":
    unittest.main()
