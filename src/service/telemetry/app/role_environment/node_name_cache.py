import threading


class NodeNameCache:
    """
    Case-insensitive slot identity → node name map, shared by all threads.

    Node names are built for every telemetry item, so the concatenation is done
    once per identity. Entries are only ever added; the first value stored for
    a key is the one every caller sees.
    """

    def __init__(self, suffix: str = '.azurewebsites.net') -> None:
        self._suffix = suffix
        self._node_names: dict[str, str] = {}
        self._lock = threading.Lock()

    def get_or_create(self, identity: str) -> str:
        key = identity.casefold()
        if (node_name := self._node_names.get(key)) is not None:
            return node_name

        # Keep the previous behavior of the node carrying the full host name
        candidate = identity + self._suffix
        with self._lock:
            return self._node_names.setdefault(key, candidate)

    def __len__(self) -> int:
        return len(self._node_names)

    def __contains__(self, identity: object) -> bool:
        return isinstance(identity, str) and identity.casefold() in self._node_names
