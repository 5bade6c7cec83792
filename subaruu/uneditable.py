from typing import Any


def fixed_keys(cls: Any):
    """Makes a mapping class refuse new keys and key deletion.

    Existing keys may still be reassigned, so the mapping keeps exactly the
    entries it was constructed with.

    Args:
        cls (Any): A dict subclass to be decorated.

    Raises:
        TypeError: If an attempt is made to assign a key that does not exist.
        TypeError: If an attempt is made to delete a key.

    Returns:
        type: The modified class.
    """
    orig_setitem = cls.__setitem__

    def __setitem__(self, key: Any, value: Any) -> None:
        if key not in self:
            raise TypeError(f"'{type(self).__name__}' object does not support adding key {key!r}")
        orig_setitem(self, key, value)

    def __delitem__(self, key: Any) -> None:
        raise TypeError(f"'{type(self).__name__}' object does not support item deletion")

    def refuse(self, *args, **kwargs):
        raise TypeError(f"'{type(self).__name__}' object has a fixed set of keys")

    cls.__setitem__ = __setitem__
    cls.__delitem__ = __delitem__
    for name in ("pop", "popitem", "clear", "setdefault", "update", "__ior__"):
        setattr(cls, name, refuse)
    return cls
