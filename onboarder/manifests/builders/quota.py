"""ResourceQuota manifest builder."""
from typing import Dict, Optional, Union

from ..models import NamedDocument, ObjectMeta, ResourceQuota
from ..naming import NO_PRIORITY, manifest_filename
from ...request.models import Request

QUOTA_NAME = "default-quotas"

class QuotaBuilder:
    """Builds the ResourceQuota from the request's optionals."""
    
    def __init__(self, extension: str = "json"):
        self.extension = extension
    
    def build(self, request: Request) -> Optional[NamedDocument]:
        """Build the ResourceQuota manifest.
        
        Only limits that were requested appear under ``spec.hard``.
        
        Args:
            request: Validated request.
            
        Returns:
            Optional[NamedDocument]: The quota, or None when the request
            carries no optionals.
        """
        if not request.optionals:
            return None
        
        quota = ResourceQuota(
            metadata=ObjectMeta(name=QUOTA_NAME, namespace=request.project_name),
            hard=self._hard_limits(request),
        )
        filename = manifest_filename(NO_PRIORITY, request.namespace, "quota", self.extension)
        return NamedDocument(filename=filename, manifest=quota)
    
    def _hard_limits(self, request: Request) -> Dict[str, Union[int, str]]:
        hard = {}
        
        cpu = request.get_optional("cpu")
        if cpu:
            # millicores carry their unit, whole cores are a bare number
            hard["limits.cpu"] = cpu.quantity if cpu.unit else cpu.count
        
        memory = request.get_optional("memory")
        if memory:
            hard["limits.memory"] = memory.quantity
        
        volumes = request.get_optional("volumes")
        if volumes:
            hard["persistentvolumeclaims"] = volumes.count
        
        storage = request.get_optional("storage")
        if storage:
            hard["requests.storage"] = storage.quantity
        
        return hard
