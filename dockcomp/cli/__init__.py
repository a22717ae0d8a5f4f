"""dockcomp CLI — completion backend for the docker command line."""

from typing import Annotated

import typer
from rich.table import Table

from dockcomp import __version__
from dockcomp.cli._completions import bash_script, format_reply
from dockcomp.cli._helpers import console, load_settings, setup_logging
from dockcomp.engine import Dispatcher, classify_tokens, tokenize_line
from dockcomp.lib.docker_client import DockerClient

app = typer.Typer(
    name="dockcomp",
    help="Resolve shell completions for the docker client.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"dockcomp {__version__}")
        raise typer.Exit()


def make_dispatcher(settings: dict) -> Dispatcher:
    """Build the dispatcher once per process, with daemon clients from ``settings``."""

    def client_factory(*, host=None, config=None):
        return DockerClient(
            host=host,
            config=config,
            binary=settings["docker_binary"],
            timeout=settings["timeout"],
        )

    return Dispatcher(client_factory)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V",
            help="Show version",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
    debug: Annotated[
        bool, typer.Option("--debug", help="Log at DEBUG level")
    ] = False,
) -> None:
    """dockcomp — context-aware completions for docker subcommands, flags and live containers/images."""
    settings = load_settings()
    setup_logging("DEBUG" if debug else settings["log_level"], settings["log_file"])
    ctx.obj = settings


@app.command()
def complete(
    ctx: typer.Context,
    words: Annotated[
        list[str], typer.Argument(help="Words of the line, command name first")
    ],
    cword: Annotated[
        int | None, typer.Option("--cword", help="Index of the word being completed (default: last)")
    ] = None,
    colon_wordbreak: Annotated[
        bool,
        typer.Option(
            "--colon-wordbreak/--no-colon-wordbreak",
            help="Trim candidates up to the last ':' of the current word",
        ),
    ] = True,
) -> None:
    """Print a directive line, then one candidate per line."""
    settings = ctx.obj or load_settings()
    if cword is None:
        cword = len(words) - 1
    completion = make_dispatcher(settings).complete(words, cword)
    cur = words[cword] if 0 <= cword < len(words) else ""
    for line in format_reply(completion, cur, colon_wordbreak=colon_wordbreak):
        typer.echo(line)


@app.command()
def script(
    command: Annotated[
        str, typer.Option("--command", help="Command to attach completion to")
    ] = "docker",
    program: Annotated[
        str, typer.Option("--program", help="How the hook invokes dockcomp")
    ] = "dockcomp",
) -> None:
    """Print the bash completion hook."""
    typer.echo(bash_script(command, program), nl=False)


@app.command()
def explain(
    ctx: typer.Context,
    line: Annotated[str, typer.Argument(help='Command line, e.g. "docker rm --force "')],
) -> None:
    """Show how a line is tokenized and what would be offered at its end."""
    settings = ctx.obj or load_settings()
    dispatcher = make_dispatcher(settings)
    words, cword = tokenize_line(line)
    cmdline = dispatcher.locate(words, cword)
    handler = dispatcher.root if cmdline.command_pos == 0 else dispatcher.table.get(cmdline.command)

    table = Table(title=f"Subcommand: {cmdline.command} (word {cmdline.command_pos})")
    table.add_column("#", justify="right")
    table.add_column("Word", style="cyan")
    table.add_column("Kind", style="magenta")
    flags = handler.value_flags if handler is not None else None
    kinds = {t.index: t.kind.value for t in classify_tokens(words, cmdline.command_pos, flags)}
    for index, word in enumerate(words):
        marker = " [green]<cursor>[/green]" if index == cword else ""
        if index == 0:
            kind = "program"
        elif index == cmdline.command_pos:
            kind = "subcommand"
        else:
            kind = kinds.get(index, "global")
        table.add_row(str(index), repr(word), kind + marker)
    console.print(table)

    if handler is None:
        console.print(f"[yellow]No completion rules for[/yellow] {cmdline.command}")
        raise typer.Exit(0)
    console.print(f"Positional slot: {cmdline.slot(handler.value_flags)}")
    completion = dispatcher.complete(words, cword)
    if not completion:
        console.print("[yellow]No candidates.[/yellow]")
        return
    for text in completion.texts():
        console.print(f"  {text}")
    if completion.filedir:
        console.print(f"  [dim](host {completion.filedir} completion)[/dim]")
