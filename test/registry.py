"""
Registry behavioral tests.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argot import Registry


class TestRegistry(TestCase):

    def testNamesAreDashStripped(self):
        registry = Registry("--out", "-j", "level")
        self.assertEqual(list(registry), ["j", "level", "out"])

    def testMembershipIgnoresDashes(self):
        registry = Registry("out")
        self.assertTrue(registry.isregistered("out"))
        self.assertTrue(registry.isregistered("--out"))
        self.assertIn("-out", registry)
        self.assertFalse(registry.isregistered("output"))

    def testBatchRegistration(self):
        registry = Registry().register(["a", "--b"], ("c",), "d")
        self.assertEqual(len(registry), 4)

    def testRegistrationIsIdempotent(self):
        registry = Registry("out")
        registry.register("out", "--out", ["-out"])
        self.assertEqual(len(registry), 1)

    def testRegisterIsChainable(self):
        registry = Registry()
        self.assertIs(registry.register("a"), registry)

    def testNonStringNamesRejected(self):
        with self.assertRaises(TypeError):
            Registry(1)
        with self.assertRaises(TypeError):
            Registry(["a", None])

    def testFailedBatchLeavesRegistryUnchanged(self):
        registry = Registry("a")
        with self.assertRaises(TypeError):
            registry.register(["b", 2])
        self.assertEqual(list(registry), ["a"])

    def testIsRegisteredRequiresString(self):
        with self.assertRaises(TypeError):
            Registry().isregistered(1)
        self.assertNotIn(1, Registry("1"))

    def testSnapshotIsFrozen(self):
        registry = Registry("a")
        snapshot = registry.snapshot()
        registry.register("b")
        self.assertEqual(snapshot, frozenset({"a"}))

    def testRepr(self):
        self.assertEqual(repr(Registry("b", "a")), "Registry('a', 'b')")


if __name__ == "__main__":
    unittest.main()
