"""Project manifest builder."""
from ..models import NamedDocument, ObjectMeta, Project
from ..naming import PRIORITY, manifest_filename
from ...request.models import Request

class ProjectBuilder:
    """Builds the Project that creates the namespace."""
    
    def __init__(self, extension: str = "json"):
        self.extension = extension
    
    def build(self, request: Request) -> NamedDocument:
        """Build the Project manifest.
        
        The project is written with the lowest priority prefix so that it
        is applied before anything placed inside it.
        """
        project = Project(metadata=ObjectMeta(name=request.project_name))
        filename = manifest_filename(PRIORITY, project.metadata.name, "project", self.extension)
        return NamedDocument(filename=filename, manifest=project)
