"""Walk through the construction variants and the mutating operations of
`LinkedSet`, printing the set after each step."""

from linkedset.linked_set import LinkedSet


def main() -> int:
    set1 = LinkedSet()
    set1.add("apple")
    set1.add("banana")
    set1.add("orange")
    print(f"Set 1: {set1}")

    set2 = LinkedSet.singleton("cherry")
    print(f"Set 2: {set2}")

    fruits = ["gooseberry", "melon"]
    set3 = LinkedSet(fruits)
    print(f"Set 3: {set3}")

    set1.add_all(set3)
    print(f"Set 1 after adding Set 3: {set1}")

    set1.remove("apple")
    print(f"Set 1 after removing 'apple': {set1}")

    set1.clear()
    print(f"Set 1 after clearing: {set1}")
    return 0
