"""Basic usage example for strlist."""

from strlist import DoublyLinkedList


def main() -> None:
    """Demonstrate list operations at both ends."""
    lst = DoublyLinkedList()

    print("=== Building ===\n")
    lst.insert_front("2")
    lst.insert_front("1")
    lst.insert_back("3")
    lst.insert_back("4")
    print(f"List: {lst}")
    print(f"Size: {lst.get_size()}\n")

    print("=== Lookups ===\n")
    for index in (0, 2, 4, -1):
        print(f"  get({index}) -> {lst.get(index)!r}")
    print(f"  front -> {lst.front()!r}, back -> {lst.back()!r}\n")

    print("=== Draining ===\n")
    while not lst.is_empty():
        print(f"  delete_back -> {lst.delete_back()!r}  remaining: {lst}")

    # Deleting from an empty list is a no-op
    print(f"\ndelete_front on empty -> {lst.delete_front()!r}")


if __name__ == "__main__":
    main()
