from dataclasses import dataclass


FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
HASH_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class Key:
    value: str
    hash: int

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("key is not str", value)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "hash", hash_string(value))

    def __str__(self) -> str:
        return self.value


def as_key(key: "str | Key") -> Key:
    if isinstance(key, Key):
        return key
    return Key(key)


def hash_string(key: str) -> int:
    # 64-bit FNV-1a over utf-8, stable between runs
    hash = FNV_OFFSET_BASIS
    for b in key.encode("utf-8"):
        hash ^= b
        hash = (hash * FNV_PRIME) & HASH_MASK
    return hash
