import unittest

from heavybag import HeavyBag, BagCollection, RemovableIterator

from .common import make_bag


class ListBag(BagCollection):
    '''A deliberately naive collection used to check that the bulk operations
    only rely on the abstract primitives.
    '''

    def __init__(self, elements=()):
        self.elements = list(elements)

    def add(self, element):
        self.elements.append(element)
        return True

    def remove(self, element):
        try:
            self.elements.remove(element)
            return True
        except ValueError:
            return False

    def __contains__(self, element):
        return element in self.elements

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return ListIterator(self.elements)


class ListIterator(RemovableIterator):
    def __init__(self, elements):
        self.elements = elements
        self.index = 0

    def has_next(self):
        return self.index < len(self.elements)

    def __next__(self):
        if not self.has_next():
            raise StopIteration()
        self.index += 1
        return self.elements[self.index - 1]

    def remove(self):
        self.index -= 1
        self.elements.pop(self.index)


class BagCollectionTests(unittest.TestCase):

    def test_heavy_bag_is_collection(self):
        self.assertIsInstance(HeavyBag(), BagCollection)
        self.assertIsInstance(iter(HeavyBag()), RemovableIterator)

    def test_abstract(self):
        self.assertRaises(TypeError, BagCollection)

    def test_add_all(self):
        bag = HeavyBag()
        self.assertTrue(bag.add_all(["a", "b", "a"]))
        self.assertEqual(bag, make_bag(a=2, b=1))
        self.assertFalse(bag.add_all([]))

    def test_add_all_from_bag(self):
        bag = make_bag(a=3)
        other = HeavyBag()
        other.add_all(bag)
        self.assertEqual(other, bag)

    def test_contains_all(self):
        bag = make_bag(a=2, b=1)
        self.assertTrue(bag.contains_all(["a", "a", "a", "b"]))
        self.assertTrue(bag.contains_all([]))
        self.assertFalse(bag.contains_all(["a", "c"]))

    def test_remove_all(self):
        bag = make_bag(a=3, b=2, c=1)
        self.assertTrue(bag.remove_all(["a", "c"]))
        self.assertEqual(bag, make_bag(b=2))
        self.assertFalse(bag.remove_all(["z"]))
        self.assertEqual(len(bag), 2)

    def test_remove_all_from_generator(self):
        bag = make_bag(a=3, b=2)
        self.assertTrue(bag.remove_all(x for x in "a"))
        self.assertEqual(bag, make_bag(b=2))

    def test_retain_all(self):
        bag = make_bag(a=3, b=2, c=1)
        self.assertTrue(bag.retain_all({"b"}))
        self.assertEqual(bag, make_bag(b=2))
        self.assertEqual(len(bag), 2)
        self.assertFalse(bag.retain_all(make_bag("b")))

    def test_retain_nothing(self):
        bag = make_bag(a=3, b=2)
        self.assertTrue(bag.retain_all([]))
        self.assertTrue(bag.is_empty())
        self.assertEqual(len(bag.unique_elements()), 0)

    def test_derived_operations_on_list_bag(self):
        items = ListBag("abcab")
        self.assertTrue(items.contains_all("cab"))
        self.assertTrue(items.remove_all("a"))
        self.assertEqual(items.elements, list("bcb"))
        self.assertTrue(items.retain_all("c"))
        self.assertEqual(items.elements, ["c"])
        self.assertTrue(items.add_all("dd"))
        self.assertEqual(len(items), 3)


if __name__ == '__main__':
    unittest.main()
