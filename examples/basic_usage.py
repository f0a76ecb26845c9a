"""Basic usage example for singlylinkedlist."""

from singlylinkedlist import NO_VALUE, OutOfBoundariesError, SinglyLinkedList


def main() -> None:
    """Demonstrate basic list operations."""
    lst = SinglyLinkedList[int]()

    print("=== Building a list ===\n")
    lst.from_array([3, 1, 4, 1, 5])
    print(f"Values: {lst.to_array()}")
    print(f"Length: {lst.length}\n")

    print("=== Positional edits ===\n")
    lst.insert(2, 9)
    print(f"After insert(2, 9): {lst.to_array()}")
    removed = lst.remove(3)
    print(f"remove(3) took {removed}: {lst.to_array()}")
    lst.set(0, 30)
    print(f"After set(0, 30): {lst.to_array()}\n")

    print("=== Both ends ===\n")
    lst.push(6)
    lst.unshift(0)
    print(f"After push(6) and unshift(0): {lst.to_array()}")
    print(f"pop() -> {lst.pop()}, shift() -> {lst.shift()}\n")

    print("=== Misses and failures ===\n")
    value = lst.get(100)
    if value is NO_VALUE:
        print("get(100) found nothing")
    try:
        lst.set(100, 1)
    except OutOfBoundariesError as e:
        print(f"set(100, 1) failed: {e}")

    lst.clear()
    print(f"\nAfter clear(): {lst.to_array()}, pop() -> {lst.pop()!r}")


if __name__ == "__main__":
    main()
