from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

import attrs


def _freeze(values: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(values))


@attrs.define(frozen=True)
class AmbientScope(Mapping[str, Any]):
    """Read-only view of the logging scope of the invocation currently executing"""

    values: Mapping[str, Any] = attrs.field(factory=dict, converter=_freeze)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get_str(self, key: str) -> str | None:
        value = self.values.get(key)
        return value if isinstance(value, str) else None

    def merged_with(self, values: Mapping[str, Any]) -> 'AmbientScope':
        return AmbientScope({**self.values, **values})
