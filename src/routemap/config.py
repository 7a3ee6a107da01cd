"""Resource generator options.

ResourceOptions is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from routemap.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ResourceOptions:
    """Options for ``resource()`` and ``resources()``. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        options = ResourceOptions(only=("index", "show"), param="slug")
        options = ResourceOptions(names={"show": "view"})
    """

    # Canonical action names to generate; None generates all of them
    only: tuple[str, ...] | None = None

    # Canonical action name -> output key
    names: Mapping[str, str] = field(default_factory=dict)

    # Member identifier placeholder (collection resources only)
    param: str = "id"

    def __post_init__(self) -> None:
        if self.only is not None:
            only = (self.only,) if isinstance(self.only, str) else tuple(self.only)
            object.__setattr__(self, "only", only)

        if not isinstance(self.names, Mapping):
            msg = f"names must be a mapping of action name to key, got {type(self.names).__name__}"
            raise ConfigurationError(msg)
        for action, key in self.names.items():
            if not isinstance(key, str) or not key:
                msg = f"Custom name for {action!r} must be a non-empty string, got {key!r}"
                raise ConfigurationError(msg)
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

        if not isinstance(self.param, str) or not self.param:
            msg = f"param must be a non-empty string, got {self.param!r}"
            raise ConfigurationError(msg)

    @classmethod
    def coerce(
        cls,
        options: "ResourceOptions | Mapping[str, Any] | None",
        overrides: Mapping[str, Any],
    ) -> "ResourceOptions":
        """Build options from an instance, a plain mapping, or keyword arguments.

        ``overrides`` are the keyword arguments passed to a generator.
        Mixing them with an explicit *options* value is a ``TypeError``.
        """
        if options is not None and overrides:
            msg = "Pass options either as a ResourceOptions/mapping or as keywords, not both"
            raise TypeError(msg)
        if isinstance(options, cls):
            return options
        if options is None:
            return cls(**overrides)
        if isinstance(options, Mapping):
            return cls(**options)
        msg = f"options must be ResourceOptions or a mapping, got {type(options).__name__}"
        raise TypeError(msg)

    def selects(self, actions: Iterable[str]) -> list[str]:
        """Filter canonical *actions* by ``only``, keeping canonical order."""
        if self.only is None:
            return list(actions)
        return [action for action in actions if action in self.only]
