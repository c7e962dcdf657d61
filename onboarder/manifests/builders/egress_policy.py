"""EgressNetworkPolicy manifest builder."""
from ..models import EgressNetworkPolicy, EgressRule, NamedDocument, ObjectMeta
from ..naming import NO_PRIORITY, manifest_filename
from ...request.models import Request

# OpenShift allows a single egress policy per project
POLICY_NAME = "default"

class EgressNetworkPolicyBuilder:
    """Builds an EgressNetworkPolicy that denies all external traffic."""
    
    def __init__(self, extension: str = "json"):
        self.extension = extension
    
    def build(self, request: Request) -> NamedDocument:
        policy = EgressNetworkPolicy(
            metadata=ObjectMeta(name=POLICY_NAME, namespace=request.project_name),
            egress=[EgressRule(type="Deny", cidr_selector="0.0.0.0/0")],
        )
        filename = manifest_filename(NO_PRIORITY, request.namespace, "egressnetworkpolicy", self.extension)
        return NamedDocument(filename=filename, manifest=policy)
