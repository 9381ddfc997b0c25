# ocgui_cli/main.py
import shutil
import subprocess
import sys
import threading
import time
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="ocgui",
    help="Developer tools for OCGUI applications.",
    add_completion=False,
)

TEMPLATE_PATH = Path(__file__).parent / "project_template"
RESTART_COMMAND = "r"


class AppProcess:
    """
    An OCGUI application running in a child interpreter.

    The child runs from the project root (the parent of lib/ when the script
    lives there) so that config.yaml and res/ resolve the same way as with
    `python lib/main.py` from the project directory.
    """

    def __init__(self, script: Path):
        self.script = script.resolve()
        self.process: Optional[subprocess.Popen] = None

    @property
    def cwd(self) -> Path:
        folder = self.script.parent
        return folder.parent if folder.name == "lib" else folder

    @property
    def running(self) -> bool:
        return self.process is not None and self.process.poll() is None

    def launch(self) -> None:
        typer.echo(f"Starting {self.script.name} in {self.cwd}")
        self.process = subprocess.Popen([sys.executable, "-u", str(self.script)], cwd=str(self.cwd))

    def terminate(self, timeout: float = 2.0) -> None:
        if not self.running:
            return
        self.process.terminate()
        try:
            self.process.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            typer.echo(f"Process {self.process.pid} ignored SIGTERM; killing it.")
            self.process.kill()

    def relaunch(self) -> None:
        typer.echo("Restarting...")
        self.terminate()
        # remi binds the same port again
        time.sleep(0.5)
        self.launch()


def watch_stdin(process: AppProcess) -> None:
    """Relaunch the app each time a line reading 'r' arrives on stdin."""
    for line in sys.stdin:
        if line.strip().lower() == RESTART_COMMAND:
            process.relaunch()


@app.command()
def run(
    file_path: Path = typer.Argument(
        Path("lib") / "main.py",
        help="The application script to run.",
        show_default=True,
    ),
):
    """
    Run an app, restarting it whenever you type 'r' and press Enter.
    """
    if not file_path.is_file():
        typer.echo(f"Error: no application script at '{file_path}'", err=True)
        raise typer.Exit(code=1)

    process = AppProcess(file_path)
    process.launch()
    typer.echo(f"Type '{RESTART_COMMAND}' and press Enter to restart.")
    threading.Thread(target=watch_stdin, args=(process,), daemon=True).start()

    # The Quit button ends the child; the CLI ends with it.
    while process.running:
        time.sleep(0.2)
    typer.echo(f"Application exited with code {process.process.returncode}.")


@app.command(name="create-project")
def create_project(
    project_name: str = typer.Argument(..., help="Directory to create for the new project."),
):
    """
    Create a project with a demo app (lib/main.py), config.yaml and res/.
    """
    target = Path.cwd() / project_name
    if target.exists():
        typer.echo(f"Error: '{project_name}' already exists.", err=True)
        raise typer.Exit(code=1)

    try:
        shutil.copytree(TEMPLATE_PATH, target)
    except OSError as e:
        shutil.rmtree(target, ignore_errors=True)
        typer.echo(f"Error: could not create '{project_name}': {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created {target}\n")
    typer.echo("Next steps:")
    typer.echo(f"  cd {project_name}")
    typer.echo("  ocgui run")


if __name__ == "__main__":
    app()
