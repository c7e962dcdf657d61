"""Tests for request parser."""
import pytest
from onboarder.request.errors import (
    IllegalSpacesError,
    IllegalUnderscoresError,
    InvalidNameError,
    InvalidUnitError,
    MalformedRequestError,
    MissingDataError,
    MissingUnitError,
    RequestTypeError,
)
from onboarder.request.models import Request, ResourceSpec, valid_name, valid_unit
from onboarder.request.parser import RequestParser

@pytest.fixture
def request_data():
    """A valid request document."""
    return {
        "projectname": "nic-test-backbase-reference",
        "role": "developer",
        "environment": "dev",
        "optionals": [
            {"name": "cpu", "count": 1},
            {"name": "memory", "count": 1, "unit": "Gi"},
            {"name": "volumes", "count": 2},
        ],
    }

def test_valid_request(request_data):
    """Test decoding a valid request."""
    request = RequestParser.decode(request_data)
    assert isinstance(request, Request)
    assert request.project_name == "nic-test-backbase-reference"
    assert request.environment == "dev"
    assert request.role == "developer"
    assert request.optionals == (
        ResourceSpec(name="cpu", count=1),
        ResourceSpec(name="memory", count=1, unit="Gi"),
        ResourceSpec(name="volumes", count=2),
    )

def test_lowercases_fields(request_data):
    """Test that names are normalized to lowercase."""
    request_data["projectname"] = "NIC-test-backbase-reference"
    request_data["environment"] = "DEV"
    request_data["role"] = "Developer"
    
    request = RequestParser.decode(request_data)
    assert request.project_name == "nic-test-backbase-reference"
    assert request.environment == "dev"
    assert request.role == "developer"

def test_decode_is_case_insensitive(request_data):
    """Test that the canonical and uppercase forms decode to the same request."""
    upper = dict(request_data, projectname="NIC-TEST-BACKBASE-REFERENCE", environment="DEV", role="DEVELOPER")
    assert RequestParser.decode(upper) == RequestParser.decode(request_data)

def test_optionals_absent(request_data):
    """Test that a request without optionals is valid."""
    del request_data["optionals"]
    request = RequestParser.decode(request_data)
    assert request.optionals == ()

@pytest.mark.parametrize("field", ["projectname", "environment"])
def test_missing_data(request_data, field):
    """Test that absent and empty required fields are rejected."""
    missing = dict(request_data)
    del missing[field]
    with pytest.raises(MissingDataError, match="^missing data$"):
        RequestParser.decode(missing)
    
    empty = dict(request_data, **{field: ""})
    with pytest.raises(MissingDataError, match="^missing data$"):
        RequestParser.decode(empty)

def test_role_required_only_when_requested(request_data):
    """Test that role is only required for role-based bindings."""
    del request_data["role"]
    assert RequestParser.decode(request_data).role is None
    with pytest.raises(MissingDataError):
        RequestParser.decode(request_data, require_role=True)

def test_illegal_spaces(request_data):
    """Test that spaces are rejected."""
    request_data["projectname"] = "nic-test backbase-reference"
    with pytest.raises(IllegalSpacesError) as exc_info:
        RequestParser.decode(request_data)
    assert str(exc_info.value) == "data contains illegal spaces"

def test_illegal_underscores(request_data):
    """Test that underscores are rejected."""
    request_data["projectname"] = "nic_test-backbase-reference"
    with pytest.raises(IllegalUnderscoresError) as exc_info:
        RequestParser.decode(request_data)
    assert str(exc_info.value) == "data contains illegal underscores"

def test_role_checked_for_characters(request_data):
    """Test that role goes through the character checks when required."""
    request_data["role"] = "read_only"
    assert RequestParser.decode(request_data).role == "read_only"
    with pytest.raises(IllegalUnderscoresError):
        RequestParser.decode(request_data, require_role=True)

def test_spaces_reported_before_underscores(request_data):
    """Test that the first violation in check order wins."""
    request_data["projectname"] = "nic_test"
    request_data["environment"] = "d ev"
    with pytest.raises(IllegalSpacesError):
        RequestParser.decode(request_data)

def test_missing_data_reported_before_invalid_optional(request_data):
    """Test that presence is checked before the optionals."""
    request_data["environment"] = ""
    request_data["optionals"][0]["name"] = "disk"
    with pytest.raises(MissingDataError):
        RequestParser.decode(request_data)

def test_invalid_optional_name(request_data):
    """Test that unknown optional names are rejected."""
    request_data["optionals"][1] = {"name": "memooory", "count": 1, "unit": "Gi"}
    with pytest.raises(InvalidNameError) as exc_info:
        RequestParser.decode(request_data)
    assert str(exc_info.value) == "optional name entry is invalid: memooory"

def test_optional_name_is_lowercased(request_data):
    """Test that optional names are matched after lowercasing."""
    request_data["optionals"][1]["name"] = "Memory"
    request = RequestParser.decode(request_data)
    assert request.optionals[1].name == "memory"

def test_invalid_optional_unit(request_data):
    """Test that unknown units are rejected."""
    request_data["optionals"][1]["unit"] = "Giz"
    with pytest.raises(InvalidUnitError) as exc_info:
        RequestParser.decode(request_data)
    assert str(exc_info.value) == "optional unit entry is invalid: Giz"

def test_empty_unit_is_invalid(request_data):
    """Test that an empty unit is not treated as absent."""
    request_data["optionals"][1]["unit"] = ""
    with pytest.raises(InvalidUnitError, match="^optional unit entry is invalid: $"):
        RequestParser.decode(request_data)

def test_missing_unit(request_data):
    """Test that storage without a unit is rejected."""
    request_data["optionals"][1] = {"name": "storage", "count": 1}
    with pytest.raises(MissingUnitError) as exc_info:
        RequestParser.decode(request_data)
    assert str(exc_info.value) == "invalid or missing unit for: storage"

def test_invalid_name_reported_before_missing_unit(request_data):
    """Test that a later invalid name wins over an earlier missing unit."""
    request_data["optionals"] = [
        {"name": "memory", "count": 1},
        {"name": "disk", "count": 1},
    ]
    with pytest.raises(InvalidNameError, match="disk"):
        RequestParser.decode(request_data)

def test_invalid_unit_reported_before_later_invalid_name(request_data):
    """Test that optionals are checked entry by entry."""
    request_data["optionals"] = [
        {"name": "memory", "count": 1, "unit": "Giz"},
        {"name": "disk", "count": 1},
    ]
    with pytest.raises(InvalidUnitError, match="Giz"):
        RequestParser.decode(request_data)

def test_cpu_with_millicores(request_data):
    """Test that cpu accepts a unit."""
    request_data["optionals"][0] = {"name": "cpu", "count": 1000, "unit": "m"}
    request = RequestParser.decode(request_data)
    assert request.optionals[0].count == 1000
    assert request.optionals[0].unit == "m"

@pytest.mark.parametrize("count,actual", [(1.1, "number"), ("1", "string"), (True, "boolean")])
def test_count_type_mismatch(request_data, count, actual):
    """Test that non-integer counts fail the structural decode."""
    request_data["optionals"][1]["count"] = count
    with pytest.raises(RequestTypeError) as exc_info:
        RequestParser.decode(request_data)
    assert exc_info.value.path == "optionals[1].count"
    assert exc_info.value.expected == "integer"
    assert exc_info.value.actual == actual
    assert str(exc_info.value) == f"invalid type for optionals[1].count: expected integer, got {actual}"

def test_type_mismatch_reported_before_spaces(request_data):
    """Test that the structural decode runs first."""
    request_data["projectname"] = "has spaces"
    request_data["environment"] = 7
    with pytest.raises(RequestTypeError, match="environment: expected string, got integer"):
        RequestParser.decode(request_data)

def test_missing_count(request_data):
    """Test that count is required."""
    del request_data["optionals"][0]["count"]
    with pytest.raises(MissingDataError, match="optionals\\[0\\].count"):
        RequestParser.decode(request_data)

def test_document_not_an_object():
    """Test that a non-mapping document is rejected."""
    with pytest.raises(RequestTypeError, match="request: expected object, got array"):
        RequestParser.decode(["dev"])

def test_load_json(tmp_path):
    """Test loading a JSON request file."""
    request_path = tmp_path / "prereqs.json"
    request_path.write_text('{\n\t"projectname": "Boogie-Test",\n\t"environment": "dev"\n}')
    
    request = RequestParser.load(str(request_path))
    assert request.project_name == "boogie-test"
    assert request.optionals == ()

def test_load_yaml(tmp_path):
    """Test loading a YAML request file."""
    yaml_content = """
    projectname: boogie-test
    environment: dev
    optionals:
      - name: storage
        count: 10
        unit: Gi
    """
    request_path = tmp_path / "prereqs.yaml"
    request_path.write_text(yaml_content)
    
    request = RequestParser.load(str(request_path))
    assert request.optionals == (ResourceSpec(name="storage", count=10, unit="Gi"),)

def test_load_malformed(tmp_path):
    """Test loading a file that is not JSON."""
    request_path = tmp_path / "prereqs.json"
    request_path.write_text('{"projectname": ')
    with pytest.raises(MalformedRequestError):
        RequestParser.load(str(request_path))

def test_load_invalid_utf8(tmp_path):
    """Test loading a file that is not valid UTF-8."""
    request_path = tmp_path / "prereqs.json"
    request_path.write_bytes(b'{"projectname": "boogie\xff", "environment": "dev"}')
    with pytest.raises(MalformedRequestError):
        RequestParser.load(str(request_path))
    
    yaml_path = tmp_path / "prereqs.yaml"
    yaml_path.write_bytes(b"projectname: boogie\xff\nenvironment: dev\n")
    with pytest.raises(MalformedRequestError):
        RequestParser.load(str(yaml_path))

def test_nonexistent_file():
    """Test loading a nonexistent file."""
    with pytest.raises(FileNotFoundError):
        RequestParser.load("nonexistent.json")

def test_valid_name():
    assert valid_name("cpu")
    assert valid_name("volumes")
    assert valid_name("storage")
    assert not valid_name("cpus")
    assert not valid_name("Memory")
    assert not valid_name("disk")

def test_valid_unit():
    assert valid_unit("Mi")
    assert valid_unit("m")
    assert not valid_unit("gb")
