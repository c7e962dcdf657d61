"""Manifest generator: builds, assembles and serializes a request's manifests."""
import json
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console

from .builders.egress_policy import EgressNetworkPolicyBuilder
from .builders.network_policy import NetworkPolicyBuilder
from .builders.project import ProjectBuilder
from .builders.quota import QuotaBuilder
from .builders.rolebinding import RoleBindingBuilder
from .models import BuilderOutput, GenerationResult, Manifest, NamedDocument, RenderedDocument
from .naming import touchfile_name
from ..config import GeneratorSettings, OutputFormat
from ..request.errors import SerializationError
from ..request.models import Request
from ..request.parser import RequestParser

console = Console(stderr=True)

class ManifestGenerator:
    """Generates the OpenShift manifests for an onboarding request."""
    
    def __init__(self, request: Request, settings: Optional[GeneratorSettings] = None):
        """Initialize the generator.
        
        Args:
            request: Validated request.
            settings: Output format, binding mode and debug flag.
        """
        self.request = request
        self.settings = settings or GeneratorSettings()
        self.debug = self.settings.debug
        
        extension = self.settings.extension
        # Builder mapping, in output order
        self.builders = {
            "Project": ProjectBuilder(extension),
            "RoleBinding": RoleBindingBuilder(extension, self.settings.binding_mode),
            "ResourceQuota": QuotaBuilder(extension),
            "NetworkPolicy": NetworkPolicyBuilder(extension),
            "EgressNetworkPolicy": EgressNetworkPolicyBuilder(extension),
        }
    
    @classmethod
    def from_file(cls, request_path: str, settings: Optional[GeneratorSettings] = None) -> "ManifestGenerator":
        """Load a request file and create a generator for it."""
        settings = settings or GeneratorSettings()
        request = RequestParser.load(request_path, require_role=settings.require_role)
        return cls(request, settings)
    
    def generate(self) -> GenerationResult:
        """Build and serialize every manifest for the request.
        
        Returns:
            GenerationResult: Serialized documents and the touchfile name.
            
        Raises:
            ConfigurationError: If the role cannot be mapped to a cluster role.
            SerializationError: If a manifest cannot be encoded.
        """
        manifests = self.assemble()
        documents = tuple(
            RenderedDocument(filename=named.filename, content=self.serialize(named.manifest))
            for named in manifests
        )
        
        if self.debug:
            console.print(f"[blue]Debug: Generated {len(documents)} manifests for {self.request.project_name}[/]")
        
        return GenerationResult(
            documents=documents,
            manifests=tuple(manifests),
            touchfile=touchfile_name(self.request.environment),
        )
    
    def assemble(self) -> List[NamedDocument]:
        """Run every builder and collect their documents.
        
        A builder returning None has nothing to emit and is skipped.
        
        Returns:
            List[NamedDocument]: Documents in builder order.
        """
        documents = []
        for kind, builder in self.builders.items():
            output: BuilderOutput = builder.build(self.request)
            if output is None:
                if self.debug:
                    console.print(f"[blue]Debug: Skipping {kind}: nothing requested[/]")
                continue
            documents.extend(output.items())
        return documents
    
    def serialize(self, manifest: Manifest) -> str:
        """Encode a single manifest in the configured format."""
        return self._dump(manifest.to_dict())
    
    def render_stream(self, result: Optional[GenerationResult] = None) -> str:
        """Encode every manifest as one aggregated document.
        
        JSON output is a ``v1`` ``List``; YAML output is a multi-document stream.
        """
        result = result or self.generate()
        items = [named.manifest.to_dict() for named in result.manifests]
        try:
            if self.settings.output_format == OutputFormat.YAML:
                return yaml.safe_dump_all(items, sort_keys=False, default_flow_style=False)
            return json.dumps({"kind": "List", "apiVersion": "v1", "items": items}, indent=2)
        except (TypeError, ValueError, yaml.YAMLError) as e:
            raise SerializationError(f"serialization error: {e}") from e
    
    def _dump(self, data: Dict[str, Any]) -> str:
        try:
            if self.settings.output_format == OutputFormat.YAML:
                return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
            return json.dumps(data, indent=2)
        except (TypeError, ValueError, yaml.YAMLError) as e:
            raise SerializationError(f"serialization error: {e}") from e
