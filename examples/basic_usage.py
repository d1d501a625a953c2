"""Basic usage example for orderedmap."""

from orderedmap import ABSENT, OrderedMap


def main() -> None:
    """Demonstrate the core map operations."""
    tasks = OrderedMap[str, dict]()

    print("=== Basic OrderedMap Example ===\n")

    tasks.set("task-1", {"action": "send_email", "to": "user@example.com"})
    tasks.set("task-2", {"action": "process_data", "records": 100})
    tasks.set("task-3", {"action": "generate_report", "format": "pdf"})

    print(f"Length: {tasks.length()}")
    print(f"Keys in order: {tasks.keys()}\n")

    # Replacing keeps the position
    tasks.set("task-2", {"action": "process_data", "records": 250})
    print(f"Second entry after replace: {tasks.index(2)}")
    print(f"Last entry: {tasks.index(-1)}\n")

    # Reposition and unset
    tasks.move_to_front("task-3")
    tasks.set("task-1", ABSENT)
    print(f"After move_to_front and unset: {tasks.keys()}\n")

    # Sort by key, descending
    tasks.sort(lambda a, b: a[0] > b[0])
    print("Sorted descending:")
    for key, value in tasks.iterate():
        print(f"  {key}: {value}")

    # Subscript view over the same map
    view = tasks.view()
    view["task-9"] = {"action": "cleanup"}
    print(f"\nView length: {len(view)}, same map: {view.unwrap() is tasks}")

    while tasks.length() > 0:
        key, _ = tasks.pop_front()
        print(f"  Popped {key}")


if __name__ == "__main__":
    main()
