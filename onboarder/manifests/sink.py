"""Output sinks for generated manifests."""
from pathlib import Path
from typing import List, TextIO

from rich.console import Console

from .models import GenerationResult

console = Console(stderr=True)

class FileSink:
    """Writes one file per manifest plus the environment touchfile."""
    
    def __init__(self, output_dir: str = "files", touchfile_dir: str = ".", debug: bool = False):
        """Initialize the sink.
        
        Args:
            output_dir: Directory for the manifest files.
            touchfile_dir: Directory for the OPSH_ENV touchfile.
            debug: If True, print every file written.
        """
        self.output_dir = Path(output_dir)
        self.touchfile_dir = Path(touchfile_dir)
        self.debug = debug
    
    def existing_files(self, result: GenerationResult) -> List[Path]:
        """Return the target paths that already exist."""
        paths = [self.output_dir / name for name in result.filenames]
        paths.append(self.touchfile_dir / result.touchfile)
        return [path for path in paths if path.exists()]
    
    def write(self, result: GenerationResult, force: bool = False) -> List[Path]:
        """Write the manifests and the touchfile.
        
        Args:
            result: Output of ManifestGenerator.generate().
            force: Overwrite files that already exist.
            
        Returns:
            List[Path]: Paths written, touchfile last.
            
        Raises:
            FileExistsError: If a target exists and force is False.
            OSError: If a file cannot be written.
        """
        existing = self.existing_files(result)
        if existing and not force:
            existing_str = ", ".join(str(path) for path in existing)
            raise FileExistsError(f"output files already exist: {existing_str}")
        
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.touchfile_dir.mkdir(parents=True, exist_ok=True)
        
        written = []
        for document in result.documents:
            path = self.output_dir / document.filename
            path.write_text(document.content)
            written.append(path)
            if self.debug:
                console.print(f"[blue]Debug: Wrote {path}[/]")
        
        # only the name matters to CI/CD
        touchfile = self.touchfile_dir / result.touchfile
        touchfile.write_text("")
        written.append(touchfile)
        if self.debug:
            console.print(f"[blue]Debug: Created touchfile {touchfile}[/]")
        
        return written

class StreamSink:
    """Writes a single aggregated document to a text stream."""
    
    def __init__(self, stream: TextIO):
        self.stream = stream
    
    def write(self, content: str) -> None:
        self.stream.write(content)
        if not content.endswith("\n"):
            self.stream.write("\n")
        self.stream.flush()
