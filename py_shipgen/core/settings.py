"""
Generation bounds for a ship.

ShipSettings is a fixed set of named numeric bounds. It is immutable: a
changed copy is produced by ``with_changes``, which validates the merged
values as a whole so paired bounds can move together.
"""

from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..errors import ConfigurationError

DEFAULT_KEYS: Tuple[str, ...] = tuple("qweasdzxcrfvtgbyhnujmikolp")

# (min field, max field) pairs that must satisfy min <= max
BOUND_PAIRS = (
    ("min_circles", "max_circles"),
    ("min_circle_distance", "max_circle_distance"),
    ("min_extra_nodes", "max_extra_nodes"),
    ("min_extra_thrusters", "max_extra_thrusters"),
    ("min_thruster_key_overlap", "max_thruster_key_overlap"),
)


class ShipSettings(BaseModel):
    """Validated bounds consumed by the generation pipeline."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    # Rings
    min_circles: int = Field(default=1, ge=1, description="Minimum number of rings")
    max_circles: int = Field(default=4, ge=1, description="Maximum number of rings")
    min_circle_distance: float = Field(default=1.0, gt=0, description="Minimum ring radius")
    max_circle_distance: float = Field(default=3.0, gt=0, description="Maximum ring radius")
    min_extra_nodes: int = Field(default=1, ge=0, description="Minimum nodes added on top of the outer three")
    max_extra_nodes: int = Field(default=5, ge=0, description="Maximum nodes added on top of the outer three")

    # Thrusters
    min_extra_thrusters: int = Field(default=0, ge=0, description="Minimum thrusters beyond the primary pair")
    max_extra_thrusters: int = Field(default=4, ge=0, description="Maximum thrusters beyond the primary pair")

    # Key mapping
    thruster_key_join_weight_threshold: float = Field(
        default=0.1, ge=0, le=1,
        description="Max distance of the first thruster's weight from 0.5 that earns a joint key",
    )
    min_thruster_key_overlap: int = Field(default=0, ge=0, description="Minimum redundancy injections")
    max_thruster_key_overlap: int = Field(default=2, ge=0, description="Maximum redundancy injections")
    thruster_available_keys: Tuple[str, ...] = Field(
        default=DEFAULT_KEYS, description="Ordered pool of key symbols, consumed without replacement",
    )

    def __init__(self, /, **data: Any):
        self._reject_unknown(data)
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigurationError(_describe(exc)) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        field_name = self._field_name(name)
        raise ConfigurationError(
            f"ShipSettings is immutable; use with_changes({field_name}=...) instead"
        )

    @field_validator("thruster_available_keys")
    @classmethod
    def _keys_unique(cls, keys: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(set(keys)) != len(keys):
            raise ValueError("thruster_available_keys contains duplicate keys")
        if any(not key for key in keys):
            raise ValueError("thruster_available_keys contains an empty key")
        return keys

    @model_validator(mode="after")
    def _check_bounds(self) -> "ShipSettings":
        for low, high in BOUND_PAIRS:
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"{low} ({getattr(self, low)}) exceeds {high} ({getattr(self, high)})")
        # Worst case: two singleton keys, a joint key and one key per extra thruster
        needed = self.max_extra_thrusters + 3
        if len(self.thruster_available_keys) < needed:
            raise ValueError(
                f"thruster_available_keys needs at least {needed} keys "
                f"for max_extra_thrusters={self.max_extra_thrusters}"
            )
        return self

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "ShipSettings":
        """Build settings from option names (snake_case or camelCase)."""
        cls._reject_unknown(values)
        try:
            return cls.model_validate(dict(values))
        except ValidationError as exc:
            raise ConfigurationError(_describe(exc)) from exc

    def with_changes(self, **changes: Any) -> "ShipSettings":
        """Return a copy with ``changes`` applied and the result revalidated."""
        self._reject_unknown(changes)
        merged = self.model_dump()
        for name, value in changes.items():
            merged[self._field_name(name)] = value
        try:
            return type(self).model_validate(merged)
        except ValidationError as exc:
            raise ConfigurationError(_describe(exc)) from exc

    def get(self) -> Dict[str, Any]:
        """Current values keyed by their camelCase option names."""
        return self.model_dump(by_alias=True)

    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        return tuple(field.alias or name for name, field in cls.model_fields.items())

    @classmethod
    def _field_name(cls, name: str) -> str:
        if name in cls.model_fields:
            return name
        for field_name, field in cls.model_fields.items():
            if field.alias == name:
                return field_name
        raise ConfigurationError(f"Unknown property: {name}")

    @classmethod
    def _reject_unknown(cls, values: Mapping[str, Any]) -> None:
        for name in values:
            cls._field_name(name)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)
