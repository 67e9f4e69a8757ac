"""Domain value objects for the catalog service.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParentRef:
    """Tri-state parent reference for move-style updates.

    Distinguishes "no change requested" (unset), "move to root" (explicit
    null) and "move under parent N" (explicit id). A bare ``int | None``
    cannot tell the first two apart.
    """

    specified: bool = False
    parent_id: int | None = None

    def __post_init__(self) -> None:
        if not self.specified and self.parent_id is not None:
            raise ValueError("parent_id requires specified=True")
        if self.parent_id is not None and self.parent_id <= 0:
            raise ValueError("parent_id must be a positive integer")

    @classmethod
    def unset(cls) -> "ParentRef":
        return cls()

    @classmethod
    def root(cls) -> "ParentRef":
        return cls(specified=True, parent_id=None)

    @classmethod
    def to(cls, parent_id: int | None) -> "ParentRef":
        """Explicit reference; ``None`` means root."""
        return cls(specified=True, parent_id=parent_id)

    @property
    def is_root(self) -> bool:
        return self.specified and self.parent_id is None

    def differs_from(self, current_parent_id: int | None) -> bool:
        """True when this is an explicit reference to a different parent."""
        return self.specified and self.parent_id != current_parent_id
