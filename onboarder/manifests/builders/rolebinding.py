"""RoleBinding manifest builder."""
from typing import List

from ..models import (
    RBAC_API_GROUP,
    NamedDocument,
    NamedDocumentSet,
    ObjectMeta,
    RoleBinding,
    RoleRef,
    Subject,
)
from ..naming import (
    NO_PRIORITY,
    create_name,
    generate_ad_group_names,
    lookup_role,
    manifest_filename,
    role_binding_name,
)
from ...config import BindingMode
from ...request.models import Request

# release management service account, admin in every project
SERVICE_ACCOUNT = "relman"
SERVICE_ACCOUNT_NAMESPACE = "relman"
SERVICE_ACCOUNT_ROLE = "admin"

class RoleBindingBuilder:
    """Builds the RoleBindings that grant AD groups access to a project."""
    
    def __init__(self, extension: str = "json", mode: BindingMode = BindingMode.GROUPS):
        """Initialize the builder.
        
        Args:
            extension: Output file extension.
            mode: GROUPS binds the DEVELOPER and VIEWER groups to edit and
                view; ROLE binds one group to the cluster role looked up
                from the request's role.
        """
        self.extension = extension
        self.mode = mode
    
    def build(self, request: Request) -> NamedDocumentSet:
        """Build all RoleBindings for the request.
        
        Args:
            request: Validated request.
            
        Returns:
            NamedDocumentSet: Group bindings followed by the service
            account binding.
            
        Raises:
            ConfigurationError: In ROLE mode, if the role is unknown.
        """
        if self.mode == BindingMode.ROLE:
            documents = [self._role_binding(request)]
        else:
            documents = self._group_bindings(request)
        documents.append(self._service_account_binding(request))
        return NamedDocumentSet(documents=tuple(documents))
    
    def _group_bindings(self, request: Request) -> List[NamedDocument]:
        groups = generate_ad_group_names(request.environment, request.project_name)
        return [
            self._group_binding(request, group_name, key.lower())
            for key, group_name in groups.items()
        ]
    
    def _role_binding(self, request: Request) -> NamedDocument:
        cluster_role = lookup_role(request.role)
        group_name = create_name(request.role, request.environment, request.project_name)
        return self._group_binding(request, group_name, cluster_role)
    
    def _group_binding(self, request: Request, group_name: str, cluster_role: str) -> NamedDocument:
        binding = RoleBinding(
            metadata=ObjectMeta(
                name=role_binding_name(request.project_name, cluster_role),
                namespace=request.project_name,
            ),
            subjects=[Subject(kind="Group", api_group=RBAC_API_GROUP, name=group_name)],
            role_ref=RoleRef(name=cluster_role),
        )
        filename = manifest_filename(
            NO_PRIORITY, request.namespace, f"{cluster_role}-rolebinding", self.extension
        )
        return NamedDocument(filename=filename, manifest=binding)
    
    def _service_account_binding(self, request: Request) -> NamedDocument:
        binding = RoleBinding(
            metadata=ObjectMeta(
                name=role_binding_name(request.project_name, f"{SERVICE_ACCOUNT_ROLE}-{SERVICE_ACCOUNT}"),
                namespace=request.project_name,
            ),
            subjects=[
                Subject(
                    kind="ServiceAccount",
                    name=SERVICE_ACCOUNT,
                    namespace=SERVICE_ACCOUNT_NAMESPACE,
                )
            ],
            role_ref=RoleRef(name=SERVICE_ACCOUNT_ROLE),
        )
        filename = manifest_filename(NO_PRIORITY, request.namespace, "default-rolebinding", self.extension)
        return NamedDocument(filename=filename, manifest=binding)
