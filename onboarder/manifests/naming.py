"""Derived names for AD groups, bindings, touchfiles and output files.

AD groups are named after the convention used when the group is created in
Active Directory::

    RES-<environment>-OPSH-<role>-<project_name>

Hyphens inside the project name become underscores; the separators between
segments stay hyphens. The whole name is uppercased.
"""
from typing import Dict

from ..request.errors import ConfigurationError

# filename prefixes; consumers apply lower values first
PRIORITY = "1"
NO_PRIORITY = "10"

# AD group key -> role segment used in the group name
AD_GROUP_ROLES = {
    "EDIT": "DEVELOPER",
    "VIEW": "VIEWER",
}

# request role -> cluster role
ROLE_LOOKUP = {
    "developer": "edit",
    "admin": "admin",
    "readonly": "view",
}


def create_name(role: str, environment: str, project_name: str) -> str:
    """Build the AD group name for a role in a project's environment."""
    name = "-".join(["RES", environment, "OPSH", role, project_name.replace("-", "_")])
    return name.upper()


def generate_ad_group_names(environment: str, project_name: str) -> Dict[str, str]:
    """Build the EDIT and VIEW AD group names for a project."""
    return {
        key: create_name(role, environment, project_name)
        for key, role in AD_GROUP_ROLES.items()
    }


def lookup_role(role: str) -> str:
    """Map a request role to the cluster role it is bound to.

    Raises:
        ConfigurationError: If the role is not one of developer, admin, readonly.
    """
    cluster_role = ROLE_LOOKUP.get((role or "").lower())
    if cluster_role is None:
        raise ConfigurationError(f"invalid user type specified: {role}")
    return cluster_role


def role_binding_name(project_name: str, role_name: str) -> str:
    return f"{project_name}-{role_name}-binding".lower()


def touchfile_name(environment: str) -> str:
    """Name of the marker file that tells CI/CD which environment to target."""
    return "OPSH_ENV." + environment.upper()


def manifest_filename(priority: str, namespace: str, suffix: str, extension: str) -> str:
    """Build an output file name, e.g. ``10-my-project-new-quota.json``."""
    return f"{priority}-{namespace.lower()}-new-{suffix}.{extension}"
