"""
Tests for the internal building blocks.

This module verifies:
- The `Unset` sentinel: singleton identity, falsy semantics, representation,
  Rich rendering, copy/pickle identity and finality.
- coalesce(): only Unset is replaced.
- StorageGuard/view(): backing fields are write-once and published read-only.
"""
import copy
import pickle
import unittest
from threading import Thread, Lock
from types import MappingProxyType
from unittest import TestCase

from rich.console import Console
from rich.text import Text

from argot.internals import *


class UnsetTest(TestCase):
    """
    Test suite for the `UnsetType` singleton.
    """

    def setUp(self) -> None:
        self.unset: UnsetType = UnsetType()

    def testSingleton(self) -> None:
        """
        The constructor returns the same object reference on every call.
        """
        self.assertIs(self.unset, UnsetType())
        self.assertIs(Unset, self.unset)

    def testHashAndSetUniqueness(self) -> None:
        set = {self.unset, UnsetType()}
        self.assertEqual(len(set), 1)

    def testRich(self) -> None:
        self.assertEqual(self.unset.__rich__(), Text("Unset", style="dim"))

    def testRichConsolePrint(self) -> None:
        """
        Console.print(...) renders 'Unset' without ANSI when color is disabled.
        """
        console = Console(color_system=None, force_terminal=False)
        with console.capture() as capture:
            console.print(self.unset)
        self.assertEqual(capture.get().strip(), "Unset")

    def testRepr(self) -> None:
        self.assertEqual(repr(self.unset), "Unset")

    def testFalsely(self) -> None:
        self.assertFalse(bool(self.unset))

    def testNotEqualToNoneOrFalse(self) -> None:
        """
        Falsy does not imply equality with other falsy values (None/False/"").
        """
        self.assertNotEqual(self.unset, None)
        self.assertNotEqual(self.unset, False)  # noqa: E712
        self.assertNotEqual(self.unset, "")

    def testCopyDeepcopyPreserveSingleton(self) -> None:
        self.assertIs(copy.copy(self.unset), self.unset)
        self.assertIs(copy.deepcopy(self.unset), self.unset)

    def testPickleRoundTrip(self) -> None:
        restored: UnsetType = pickle.loads(pickle.dumps(self.unset))
        self.assertIs(restored, self.unset)

    def testThreadSafetySingleton(self) -> None:
        """
        Concurrent constructions return the same instance.
        """
        results: list[UnsetType] = []
        lock: Lock = Lock()

        def worker():
            instance = UnsetType()
            with lock:
                results.append(instance)

        threads: list[Thread] = [Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 16)
        for instance in results:
            self.assertIs(instance, self.unset)

    def testFinalClass(self) -> None:
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})

    def testUnionAnnotations(self) -> None:
        self.assertIsInstance("x", str | Unset)
        self.assertIsInstance(Unset, str | Unset)
        self.assertNotIsInstance(1, str | Unset)


class CoalesceTest(TestCase):

    def testUnsetIsReplaced(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testFalseyValuesArePreserved(self):
        for value in (None, 0, "", [], False):
            with self.subTest(value=value):
                self.assertIs(coalesce(value, "fallback"), value)


class Sample(StorageGuard):
    items = view("items")
    mapping = view("mapping")
    tags = view("tags")
    label = view("label")

    def __new__(cls, items, mapping, tags, label):
        with super().__new__(cls) as self:
            setattr(self, "-items", list(items))
            setattr(self, "-mapping", dict(mapping))
            setattr(self, "-tags", set(tags))
            setattr(self, "-label", label)
        return self


class StorageGuardTest(TestCase):

    def setUp(self):
        self.sample = Sample([1, 2], {"a": 1}, {"x"}, "name")

    def testViewsAreReadOnlyContainers(self):
        self.assertEqual(self.sample.items, (1, 2))
        self.assertIsInstance(self.sample.mapping, MappingProxyType)
        self.assertEqual(self.sample.tags, frozenset({"x"}))
        self.assertEqual(self.sample.label, "name")

    def testMappingViewCannotBeMutated(self):
        with self.assertRaises(TypeError):
            self.sample.mapping["b"] = 2  # type: ignore[index]

    def testBackingFieldsAreHidden(self):
        with self.assertRaises(AttributeError):
            getattr(self.sample, "-items")

    def testBackingFieldsAreWriteOnce(self):
        with self.assertRaises(AttributeError):
            setattr(self.sample, "-items", [3])
        self.assertEqual(self.sample.items, (1, 2))

    def testPublicAttributesCannotBeSet(self):
        with self.assertRaises(AttributeError):
            self.sample.items = (3,)
        with self.assertRaises(AttributeError):
            self.sample.other = 1

    def testAttributesCannotBeDeleted(self):
        with self.assertRaises(AttributeError):
            del self.sample.items


class RenameTest(TestCase):

    def testFunctionForm(self):
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testCurriedForm(self):
        @rename("renamed")
        def function():
            pass

        self.assertEqual(function.__name__, "renamed")

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            rename(lambda: None, 1)


if __name__ == '__main__':
    unittest.main()
