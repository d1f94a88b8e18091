from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class EnumerationConfig:
    """Settings for rooted tree enumeration.

    Parameters
    - practical_max_order: largest order enumerated without a warning. Larger
      orders are still computed exactly, only slowly.
    - deduplicate: drop candidates whose canonical form was already produced.
      With ``False`` the partition and index constraints alone must prevent
      duplicates.
    """

    practical_max_order: int = 11
    deduplicate: bool = True

    def __post_init__(self) -> None:
        if self.practical_max_order < 1:
            raise ValueError(
                f"practical_max_order must be >= 1, got {self.practical_max_order}."
            )
