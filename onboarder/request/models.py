"""Validated request value objects."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

VALID_NAMES = ("cpu", "memory", "volumes", "storage")

# "m" applies to cpu, the rest to memory and storage
VALID_UNITS = ("Mi", "Gi", "Ti", "Ki", "K", "M", "G", "T", "m")

UNIT_REQUIRED = ("memory", "storage")


def valid_name(name: str) -> bool:
    """Check an optional's name against the permitted names (case-sensitive)."""
    return name in VALID_NAMES


def valid_unit(unit: str) -> bool:
    """Check a unit token against the permitted units (case-sensitive)."""
    return unit in VALID_UNITS


@dataclass(frozen=True)
class ResourceSpec:
    """A requested quota entry."""
    name: str
    count: int
    unit: Optional[str] = None

    @property
    def quantity(self) -> str:
        """The count with its unit suffix, e.g. ``1000m`` or ``5Gi``."""
        return f"{self.count}{self.unit or ''}"


def valid_unit_dependency(spec: ResourceSpec) -> bool:
    """Memory and storage are meaningless without a unit."""
    if spec.name in UNIT_REQUIRED and not spec.unit:
        return False
    return True


@dataclass(frozen=True)
class Request:
    """A decoded, checked and normalized onboarding request."""
    project_name: str
    environment: str
    role: Optional[str] = None
    optionals: Tuple[ResourceSpec, ...] = field(default_factory=tuple)

    @property
    def namespace(self) -> str:
        return self.project_name.lower()

    def get_optional(self, name: str) -> Optional[ResourceSpec]:
        """Return the first optional with the given name, if any."""
        for spec in self.optionals:
            if spec.name == name:
                return spec
        return None
