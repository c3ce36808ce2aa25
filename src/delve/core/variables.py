"""Case-insensitive name/value store for variables, aliases and type handlers."""

from typing import Iterator


class VariableStore:
    """Maps names to string values, comparing names case-insensitively.

    The name is kept as first written for display; later writes replace
    the value in place.
    """

    def __init__(self):
        self._entries: dict[str, tuple[str, str]] = {}

    def get(self, name: str) -> str | None:
        """Get the value stored under `name`, or None."""
        entry = self._entries.get(name.lower())
        return entry[1] if entry else None

    def set(self, name: str, value: str | None = None) -> str | None:
        """
        Store `value` under `name` and return the stored value.

        With `value` None nothing is created or changed; the current value
        (or None) is returned.
        """
        key = name.lower()
        if value is None:
            return self.get(name)
        display_name = self._entries[key][0] if key in self._entries else name
        self._entries[key] = (display_name, value)
        return value

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over (name, value) pairs."""
        return iter(list(self._entries.values()))

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)
