"""OpenShift onboarder CLI entrypoint."""
import sys
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from onboarder.config import BindingMode, GeneratorSettings, OutputFormat
from onboarder.manifests.generator import ManifestGenerator
from onboarder.manifests.naming import create_name, generate_ad_group_names, lookup_role, touchfile_name
from onboarder.manifests.sink import FileSink, StreamSink
from onboarder.request.errors import OnboardingError
from onboarder.request.parser import RequestParser

app = typer.Typer(help="OpenShift onboarder - generate project, RBAC, quota and network policy manifests")
console = Console()
err_console = Console(stderr=True)

def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(f"[bold red]Error: {escape(message)}[/]")
    raise typer.Exit(code=1)

@app.command("generate")
def generate(
    config: str = typer.Option("prereqs.json", "--config", "-c", help="Path to the request file"),
    output_dir: str = typer.Option("files", "--output-dir", "-o", help="Directory for generated manifests"),
    output_format: OutputFormat = typer.Option(OutputFormat.JSON, "--format", help="Manifest encoding"),
    mode: BindingMode = typer.Option(BindingMode.GROUPS, "--mode", help="RoleBinding layout"),
    touchfile_dir: str = typer.Option(".", "--touchfile-dir", help="Directory for the OPSH_ENV touchfile"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
    debug: bool = typer.Option(False, "--debug", help="Print verbose debug information")
):
    """Generate manifest files and the environment touchfile."""
    console.print("[bold blue]Generating manifests...[/]")
    settings = GeneratorSettings(
        output_dir=output_dir,
        output_format=output_format,
        binding_mode=mode,
        touchfile_dir=touchfile_dir,
        debug=debug,
    )
    
    try:
        generator = ManifestGenerator.from_file(config, settings)
        result = generator.generate()
        sink = FileSink(settings.output_dir, settings.touchfile_dir, debug=debug)
        written = sink.write(result, force=force)
    except FileExistsError as e:
        err_console.print(f"[bold yellow]WARNING: {escape(str(e))}[/]")
        err_console.print("[yellow]Use --force to overwrite existing files.[/]")
        raise typer.Exit(code=1)
    except (OnboardingError, OSError) as e:
        fail(str(e))
    
    for path in written:
        console.print(f"[green]Wrote {escape(str(path))}[/]")

@app.command("render")
def render(
    config: str = typer.Option("prereqs.json", "--config", "-c", help="Path to the request file"),
    output_format: OutputFormat = typer.Option(OutputFormat.JSON, "--format", help="Manifest encoding"),
    mode: BindingMode = typer.Option(BindingMode.GROUPS, "--mode", help="RoleBinding layout"),
    debug: bool = typer.Option(False, "--debug", help="Print verbose debug information")
):
    """Print every manifest to stdout as a single document."""
    settings = GeneratorSettings(output_format=output_format, binding_mode=mode, debug=debug)
    
    try:
        generator = ManifestGenerator.from_file(config, settings)
        content = generator.render_stream()
    except (OnboardingError, OSError) as e:
        fail(str(e))
    
    StreamSink(sys.stdout).write(content)

@app.command("validate")
def validate(
    config: str = typer.Option("prereqs.json", "--config", "-c", help="Path to the request file"),
    mode: BindingMode = typer.Option(BindingMode.GROUPS, "--mode", help="RoleBinding layout")
):
    """Validate a request and show the names derived from it."""
    try:
        request = RequestParser.load(config, require_role=mode == BindingMode.ROLE)
        if mode == BindingMode.ROLE:
            groups = {lookup_role(request.role).upper(): create_name(request.role, request.environment, request.project_name)}
        else:
            groups = generate_ad_group_names(request.environment, request.project_name)
    except (OnboardingError, OSError) as e:
        fail(str(e))
    
    table = Table(title="Onboarding Request")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Project", escape(request.project_name))
    table.add_row("Environment", escape(request.environment))
    if request.role:
        table.add_row("Role", escape(request.role))
    for key, group_name in groups.items():
        table.add_row(f"AD group ({key})", escape(group_name))
    table.add_row("Touchfile", escape(touchfile_name(request.environment)))
    for spec in request.optionals:
        table.add_row(f"Optional: {spec.name}", spec.quantity)
    console.print(table)
    
    console.print("[green]Request is valid[/]")

if __name__ == "__main__":
    app()
