import copy
import pickle
import unittest

from foldopt import Option, Some, NONE, from_nullable, fold


class TestOptionVariants(unittest.TestCase):
    def test_some_and_none_are_options(self):
        self.assertTrue(isinstance(Some(1), Option))
        self.assertTrue(isinstance(NONE, Option))
        self.assertEqual(repr(NONE), "None")
        self.assertEqual(Some(3), Some(3))
        self.assertNotEqual(Some(3), NONE)

    def test_some_is_frozen(self):
        s = Some(1)
        with self.assertRaises(Exception):
            s.value = 2  # type: ignore[misc]

    def test_some_none_is_present(self):
        self.assertTrue(Some(None).is_some())
        self.assertEqual(Some(None).get_or_else(5), None)

    def test_base_fold_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            Option().fold(0, lambda v: v)

    def test_from_nullable(self):
        self.assertEqual(from_nullable(None), NONE)
        self.assertEqual(from_nullable(0), Some(0))
        self.assertEqual(from_nullable(None).get_or_else(5), 5)

    def test_none_survives_copy_and_pickle(self):
        self.assertIs(copy.copy(NONE), NONE)
        self.assertIs(copy.deepcopy(NONE), NONE)
        self.assertIs(pickle.loads(pickle.dumps(NONE)), NONE)
        self.assertEqual(copy.deepcopy(Some(NONE)), Some(NONE))
        self.assertEqual(pickle.loads(pickle.dumps(Some(NONE))), Some(NONE))


class TestFoldPrimitive(unittest.TestCase):
    def test_fold_present_applies_function(self):
        self.assertEqual(fold(Some(2), 0, lambda x: x * 10), 20)

    def test_fold_absent_skips_function(self):
        calls = []

        def f(x):
            calls.append(x)
            return x

        self.assertEqual(fold(NONE, "d", f), "d")
        self.assertEqual(calls, [])


class TestOptionMethods(unittest.TestCase):
    def test_method_chain(self):
        r = Some("42").map(int).filter(lambda x: x > 40).and_then(lambda x: Some(x + 1))
        self.assertEqual(r, Some(43))
        self.assertEqual(Some(2).flat_map(lambda x: Some(x * 2)), Some(4))
        self.assertTrue(NONE.map(int).is_none())

    def test_method_fallbacks(self):
        self.assertEqual(NONE.or_else(lambda: Some(1)), Some(1))
        self.assertEqual(NONE.or_(Some(2)), Some(2))
        self.assertEqual(NONE.get_or_else_with(lambda: 3), 3)
        self.assertEqual(Some(1).map_or(0, lambda x: x + 1), 2)

    def test_method_pairs(self):
        self.assertEqual(Some(1).xor(NONE), Some(1))
        self.assertEqual(Some(1).zip(Some("a")), Some((1, "a")))
        self.assertTrue(Some(1).contains(1))
        self.assertEqual(Some(1).to_list(), [1])
        self.assertIsNone(NONE.to_nullable())


if __name__ == "__main__":
    unittest.main()
