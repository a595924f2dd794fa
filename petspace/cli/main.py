"""Command-line entry point for petspace.

Commands:
- petspace demo
- petspace chat <room> <sender> <message>...
- petspace version
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from petspace import __logo__, __version__
from petspace.config.loader import load_config
from petspace.models.delivery import DeliveryState
from petspace.participants.participant import Participant
from petspace.rooms.factory import build_rooms, preset_room
from petspace.rooms.mediator import RoomMediator
from petspace.utils.logging import configure_logging

app = typer.Typer(
    name="petspace",
    help=f"{__logo__} PetSpace chat rooms",
    no_args_is_help=True,
)

console = Console()


def _history_table(room: RoomMediator) -> Table:
    """Render a room's history by walking it with a history iterator."""
    table = Table(title=Text(f"{room.label or '(unnamed)'} history"))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Entry")

    iterator = room.create_iterator()
    position = 1
    while iterator.has_next():
        table.add_row(str(position), Text(iterator.next()))
        position += 1
    return table


def _parse_member(spec: str, default_state: DeliveryState) -> Participant:
    """Parse ``NAME`` or ``NAME:STATE`` into a participant."""
    name, _, state_label = spec.partition(":")
    state = DeliveryState.from_label(state_label) if state_label else default_state
    return Participant(name, delivery_state=state)


def _setup(config_path: Optional[Path], verbose: bool):
    config = load_config(config_path)
    configure_logging(config.log_level, config.log_file, verbose or config.verbose)
    return config


@app.command()
def demo(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """Run a scripted conversation across the preset rooms."""
    config = _setup(config_path, verbose)
    rooms = build_rooms(config.preset_rooms)
    if not rooms:
        console.print("[red]No preset rooms configured[/red]")
        raise typer.Exit(1)

    state = config.default_delivery_state
    alice = Participant("Alice", delivery_state=state)
    bob = Participant("Bob", delivery_state=state)
    charlie = Participant("Charlie", delivery_state=state)
    admin = Participant("SuperAdmin")
    admin.set_elevated(True)

    first, last = rooms[0], rooms[-1]
    alice.join_room(first)
    bob.join_room(first)
    bob.join_room(last)
    charlie.join_room(last)

    alice.send(f"Hello from {first.label}!", first)
    bob.send("Hi Alice!", first)
    charlie.send("Woof woof!", last)

    alice.change_state(DeliveryState.DEFERRED)
    bob.send("Are you there, Alice?", first)
    alice.change_state(DeliveryState.AVAILABLE)

    denied = charlie.create_room("ShouldFail")
    lounge = admin.create_room("TechTalk")
    admin.join_room(lounge)
    alice.join_room(lounge)
    admin.send("Welcome to the lounge!", lounge)

    alice.leave_room(first)
    bob.send("Alice left the room", first)

    console.print()
    for room in [*rooms, lounge]:
        console.print(_history_table(room))
    if denied is None:
        console.print("[yellow]Charlie was not allowed to create a room[/yellow]")


@app.command()
def chat(
    room_label: str = typer.Argument(..., metavar="ROOM", help="Room label (CtrlCat, Dogorithm or any name)"),
    sender_name: str = typer.Argument(..., metavar="SENDER", help="Name of the sending participant"),
    messages: List[str] = typer.Argument(..., help="Messages to send, in order"),
    members: List[str] = typer.Option([], "--member", "-m", help="Other member as NAME or NAME:STATE"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """Send messages into a single room and print its history."""
    config = _setup(config_path, verbose)
    if not sender_name:
        console.print("[red]Sender name must not be empty[/red]")
        raise typer.Exit(1)

    try:
        others = [_parse_member(spec, config.default_delivery_state) for spec in members]
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    room = preset_room(room_label)
    sender = Participant(sender_name, delivery_state=config.default_delivery_state)
    sender.join_room(room)
    for member in others:
        member.join_room(room)

    for text in messages:
        sender.send(text, room)

    console.print(_history_table(room))
    for member in others:
        status = member.delivery_state.state_name if member.delivery_state else "-"
        console.print(escape(f"{member.name} [{status}]: {len(member.inbox)} message(s) accepted"))


@app.command()
def version():
    """Show the installed version."""
    console.print(f"{__logo__} petspace v{__version__}")


if __name__ == "__main__":
    app()
