"""Request document parser."""
import json
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import ValidationError

from .errors import (
    IllegalSpacesError,
    IllegalUnderscoresError,
    InvalidNameError,
    InvalidUnitError,
    MalformedRequestError,
    MissingDataError,
    MissingUnitError,
    RequestTypeError,
)
from .models import Request, ResourceSpec, valid_name, valid_unit, valid_unit_dependency
from .schema import RequestDocument

# pydantic error type -> kind named in the error message
EXPECTED_KINDS = {
    "string_type": "string",
    "int_type": "integer",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}

class RequestParser:
    """Parser for onboarding request documents."""
    
    @staticmethod
    def load(file_path: str, require_role: bool = False) -> Request:
        """Load and validate a request file.
        
        Args:
            file_path: Path to the request file. ``.json`` files are read with
                the json module, anything else as YAML.
            require_role: If True, ``role`` is a required field.
            
        Returns:
            Request: Validated request.
            
        Raises:
            FileNotFoundError: If the request file doesn't exist.
            MalformedRequestError: If the file is not valid UTF-8 JSON or YAML.
            OnboardingError: If the request fails validation.
        """
        path = Path(file_path)
        with open(path, 'r', encoding="utf-8") as f:
            try:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
            except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
                raise MalformedRequestError(f"failed to parse {file_path}: {e}") from e
        return RequestParser.decode(data, require_role=require_role)
    
    @staticmethod
    def decode(data: Any, require_role: bool = False) -> Request:
        """Validate a plain decoded document and build a Request.
        
        Checks run in a fixed order and the first failure is raised:
        field types, presence, spaces, underscores, then each optional's
        name and unit in input order, then the memory/storage unit
        dependency.
        
        Args:
            data: Mapping produced by a JSON or YAML load.
            require_role: If True, ``role`` is checked along with
                ``projectname`` and ``environment``.
            
        Returns:
            Request: Validated, lowercased request.
        """
        document = RequestParser._decode_structure(data)
        
        fields = [document.projectname, document.environment]
        if require_role:
            fields.append(document.role)
        
        if not all(fields):
            raise MissingDataError()
        if any(" " in value for value in fields):
            raise IllegalSpacesError()
        if any("_" in value for value in fields):
            raise IllegalUnderscoresError()
        
        optionals = RequestParser._decode_optionals(document)
        
        return Request(
            project_name=document.projectname.lower(),
            environment=document.environment.lower(),
            role=document.role.lower() if document.role else None,
            optionals=tuple(optionals),
        )
    
    @staticmethod
    def _decode_structure(data: Any) -> RequestDocument:
        """Run the pydantic model over the raw data, translating its errors."""
        try:
            return RequestDocument.model_validate(data)
        except ValidationError as e:
            # only the first violation is reported
            error = e.errors()[0]
            path = RequestParser._format_location(error["loc"])
            if error["type"] == "missing":
                raise MissingDataError(path) from e
            expected = EXPECTED_KINDS.get(error["type"], error["type"])
            raise RequestTypeError(path, expected, _json_kind(error.get("input"))) from e
    
    @staticmethod
    def _decode_optionals(document: RequestDocument) -> List[ResourceSpec]:
        specs = []
        for entry in document.optionals or []:
            name = entry.name.lower()
            if not valid_name(name):
                raise InvalidNameError(name)
            if entry.unit is not None and not valid_unit(entry.unit):
                raise InvalidUnitError(entry.unit)
            specs.append(ResourceSpec(name=name, count=entry.count, unit=entry.unit))
        
        for spec in specs:
            if not valid_unit_dependency(spec):
                raise MissingUnitError(spec.name)
        return specs
    
    @staticmethod
    def _format_location(loc) -> str:
        """Render a pydantic location tuple as ``optionals[1].count``."""
        path = ""
        for part in loc:
            if isinstance(part, int):
                path += f"[{part}]"
            elif path:
                path += f".{part}"
            else:
                path = str(part)
        return path or "request"


def _json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
