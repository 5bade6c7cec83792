from string import ascii_lowercase

from subaruu.uneditable import fixed_keys


@fixed_keys
class VariableStore(dict):
    """The 26 integer registers a-z, all zero at construction."""

    def __init__(self):
        super().__init__((name, 0) for name in ascii_lowercase)

    def read(self, name: str) -> int:
        return self[name.lower()]

    def assign(self, name: str, value: int):
        self[name.lower()] = value

    def reset(self):
        for name in self:
            dict.__setitem__(self, name, 0)
        return self
