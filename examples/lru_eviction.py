"""Least-recently-used cache built on OrderedMap."""

from orderedmap import ABSENT, OrderedMap


class LRUCache:
    """Fixed-capacity cache evicting the least recently used key."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries = OrderedMap[str, int]()

    def get(self, key: str) -> int | None:
        value = self._entries.get(key)
        if value is ABSENT:
            return None
        self._entries.move_to_back(key)
        return value

    def put(self, key: str, value: int) -> None:
        if self._entries.contains(key):
            self._entries.set(key, value)
            self._entries.move_to_back(key)
            return
        if self._entries.length() >= self.capacity:
            evicted, _ = self._entries.pop_front()
            print(f"  evicted {evicted}")
        self._entries.set(key, value)


def main() -> None:
    cache = LRUCache(capacity=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)  # evicts b
    print(f"a={cache.get('a')} b={cache.get('b')} c={cache.get('c')}")


if __name__ == "__main__":
    main()
