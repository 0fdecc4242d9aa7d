"""Metadata container shared between the fetcher and its caller."""


class Metadata:
    """Ordered mapping from keys to lists of string values.

    Keys keep their insertion order. A key may carry several values;
    most producers only ever set one.
    """

    def __init__(self, values: dict[str, list[str]] | None = None):
        self._md: dict[str, list[str]] = {}
        for key, vals in (values or {}).items():
            self._md[key] = list(vals)

    def set_value(self, key: str, value: str) -> None:
        """Replace all values of key with a single value."""
        self._md[key] = [value]

    def add_value(self, key: str, value: str) -> None:
        """Append a value to key, creating it if needed."""
        self._md.setdefault(key, []).append(value)

    def get_first_value(self, key: str) -> str | None:
        values = self._md.get(key)
        if not values:
            return None
        return values[0]

    def get_values(self, key: str) -> list[str]:
        return list(self._md.get(key, []))

    def remove(self, key: str) -> list[str]:
        """Remove key and return the values it held."""
        return self._md.pop(key, [])

    def keys(self) -> list[str]:
        return list(self._md)

    def as_dict(self) -> dict[str, list[str]]:
        """Return a copy of the underlying mapping."""
        return {key: list(vals) for key, vals in self._md.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._md

    def __len__(self) -> int:
        return len(self._md)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metadata):
            return NotImplemented
        return self._md == other._md

    def __repr__(self) -> str:
        return f"Metadata({self._md!r})"
