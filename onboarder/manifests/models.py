"""Shared data models for manifest generation."""
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

RBAC_API_GROUP = "rbac.authorization.k8s.io"

@dataclass
class ObjectMeta:
    """Manifest metadata."""
    name: str
    namespace: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name}
        if self.namespace:
            data["namespace"] = self.namespace
        return data

@dataclass
class Subject:
    """RoleBinding subject (Group or ServiceAccount)."""
    kind: str
    name: str
    api_group: Optional[str] = None
    namespace: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"kind": self.kind}
        if self.api_group:
            data["apiGroup"] = self.api_group
        data["name"] = self.name
        if self.namespace:
            data["namespace"] = self.namespace
        return data

@dataclass
class RoleRef:
    """Reference to the role granted by a RoleBinding."""
    name: str
    kind: str = "ClusterRole"
    api_group: str = RBAC_API_GROUP

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "apiGroup": self.api_group, "name": self.name}

@dataclass
class Manifest:
    """Common header of every manifest kind."""
    kind: ClassVar[str]
    api_version: ClassVar[str]

    metadata: ObjectMeta

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "apiVersion": self.api_version,
            "metadata": self.metadata.to_dict(),
        }

@dataclass
class Project(Manifest):
    kind: ClassVar[str] = "Project"
    api_version: ClassVar[str] = "project.openshift.io/v1"

@dataclass
class RoleBinding(Manifest):
    kind: ClassVar[str] = "RoleBinding"
    api_version: ClassVar[str] = "rbac.authorization.k8s.io/v1"

    subjects: List[Subject] = field(default_factory=list)
    role_ref: Optional[RoleRef] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["subjects"] = [subject.to_dict() for subject in self.subjects]
        data["roleRef"] = self.role_ref.to_dict() if self.role_ref else {}
        return data

@dataclass
class ResourceQuota(Manifest):
    kind: ClassVar[str] = "ResourceQuota"
    api_version: ClassVar[str] = "v1"

    # limit key -> bare integer or quantity string
    hard: Dict[str, Union[int, str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["spec"] = {"hard": dict(self.hard)}
        return data

@dataclass
class NetworkPolicy(Manifest):
    kind: ClassVar[str] = "NetworkPolicy"
    api_version: ClassVar[str] = "networking.k8s.io/v1"

    policy_types: List[str] = field(default_factory=lambda: ["Ingress", "Egress"])

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        # an empty selector matches every pod in the namespace
        data["spec"] = {"podSelector": {}, "policyTypes": list(self.policy_types)}
        return data

@dataclass
class EgressRule:
    type: str
    cidr_selector: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "to": {"cidrSelector": self.cidr_selector}}

@dataclass
class EgressNetworkPolicy(Manifest):
    kind: ClassVar[str] = "EgressNetworkPolicy"
    api_version: ClassVar[str] = "network.openshift.io/v1"

    egress: List[EgressRule] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["spec"] = {"egress": [rule.to_dict() for rule in self.egress]}
        return data

@dataclass(frozen=True)
class NamedDocument:
    """A single manifest and the file it is written to."""
    filename: str
    manifest: Manifest

    def items(self) -> Tuple["NamedDocument", ...]:
        return (self,)

@dataclass(frozen=True)
class NamedDocumentSet:
    """Several manifests produced by one builder."""
    documents: Tuple[NamedDocument, ...]

    def items(self) -> Tuple[NamedDocument, ...]:
        return self.documents

# None means the builder had nothing to emit
BuilderOutput = Optional[Union[NamedDocument, NamedDocumentSet]]

@dataclass(frozen=True)
class RenderedDocument:
    """Serialized manifest ready for an output sink."""
    filename: str
    content: str

@dataclass(frozen=True)
class GenerationResult:
    """Everything a run produces."""
    documents: Tuple[RenderedDocument, ...]
    manifests: Tuple[NamedDocument, ...]
    touchfile: str

    @property
    def filenames(self) -> List[str]:
        return [document.filename for document in self.documents]
