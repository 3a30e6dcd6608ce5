"""Abstract base classes shared by curvestep algorithms.

Configs are immutable payloads that validate themselves on construction;
backends are stateless numerical kernels driven by a facade.
"""

from abc import ABC


class _CurvestepBaseConfig(ABC):
    """Marker base class for configuration payloads.

    Concrete configs are frozen dataclasses; ``__post_init__`` dispatches
    to :meth:`_validate` so invalid values never produce an instance.
    """

    __slots__ = ()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Validate the configuration."""
        pass


class _CurvestepBaseBackend(ABC):
    """Marker base class for numerical backends."""

    def __str__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
