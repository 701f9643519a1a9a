"""Request-type keyed command registry."""

from __future__ import annotations

from typing import Protocol

from ..exceptions import UnknownCommandError
from ..logging_config import log_debug
from .outcome import CommandOutcome
from .requests import COMMAND_IDS, CommandRequest


class Command(Protocol):
    async def run(self, request) -> CommandOutcome: ...


class CommandDispatcher:
    """Route each request to the command registered for its type."""

    def __init__(self) -> None:
        self._commands: dict[type, Command] = {}

    def register(self, request_type: type, command: Command) -> None:
        if request_type not in COMMAND_IDS:
            raise TypeError(f"{request_type.__name__} is not a command request type")
        self._commands[request_type] = command

    def command_for(self, request_type: type) -> Command | None:
        return self._commands.get(request_type)

    async def invoke(self, request: CommandRequest) -> CommandOutcome:
        command = self._commands.get(type(request))
        if command is None:
            raise UnknownCommandError(f"no command registered for {type(request).__name__}")
        log_debug(f"invoke {COMMAND_IDS[type(request)]}")
        return await command.run(request)


__all__ = ["Command", "CommandDispatcher"]
