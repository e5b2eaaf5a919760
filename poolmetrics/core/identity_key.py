"""Identity-based map key for pool instances."""

from typing import Any


class IdentityKey:
    """Wraps a pool so dict lookups use object identity.

    Pool classes often define ``__eq__``/``__hash__`` over configuration or
    an internal token, which would make two distinct pools collide (or make
    the pool unhashable).  Two keys are equal only when they wrap the very
    same object.
    """

    __slots__ = ("_pool",)

    def __init__(self, pool: Any) -> None:
        self._pool = pool

    @property
    def pool(self) -> Any:
        """The wrapped pool instance."""
        return self._pool

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityKey):
            return NotImplemented
        return self.pool is other.pool

    def __hash__(self) -> int:
        return id(self.pool)

    def __repr__(self) -> str:
        return f"IdentityKey({self.pool!r})"
