"""NetworkPolicy manifest builder."""
from ..models import NamedDocument, NetworkPolicy, ObjectMeta
from ..naming import NO_PRIORITY, manifest_filename
from ...request.models import Request

POLICY_NAME = "deny-by-default"

class NetworkPolicyBuilder:
    """Builds the deny-by-default NetworkPolicy.

    kind: NetworkPolicy
    apiVersion: networking.k8s.io/v1
    metadata:
      name: deny-by-default
      namespace: <project>
    spec:
      podSelector: {}
      policyTypes:
        - Ingress
        - Egress
    """
    
    def __init__(self, extension: str = "json"):
        self.extension = extension
    
    def build(self, request: Request) -> NamedDocument:
        policy = NetworkPolicy(metadata=ObjectMeta(name=POLICY_NAME, namespace=request.project_name))
        filename = manifest_filename(NO_PRIORITY, request.namespace, "networkpolicy", self.extension)
        return NamedDocument(filename=filename, manifest=policy)
