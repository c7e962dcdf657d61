"""Generator settings."""
from enum import Enum
from pydantic import BaseModel

class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"

class BindingMode(str, Enum):
    """Which RoleBinding layout to generate."""
    # edit and view bindings for the DEVELOPER and VIEWER AD groups
    GROUPS = "groups"
    # one binding for the cluster role looked up from the request's role
    ROLE = "role"

class GeneratorSettings(BaseModel):
    """Settings shared by the generator, the sinks and the CLI."""
    output_dir: str = "files"
    output_format: OutputFormat = OutputFormat.JSON
    binding_mode: BindingMode = BindingMode.GROUPS
    touchfile_dir: str = "."
    debug: bool = False

    @property
    def extension(self) -> str:
        return self.output_format.value

    @property
    def require_role(self) -> bool:
        return self.binding_mode == BindingMode.ROLE
