"""Typed argument resolution for hikari prefix and slash commands."""

from .commands import (
    AdvancedUserArgument,
    AdvancedUserMatch,
    ArgumentDefinition,
    ArgumentType,
    ChannelArgument,
    FloatArgument,
    FuzzyMemberResolver,
    IntegerArgument,
    ParsedArgument,
    SlashCommandOptions,
    StringArgument,
    UserArgument,
    UserIDArgument,
)
from .commands.registry import (
    parse_interaction_arguments,
    parse_message_arguments,
    slash_command_options,
)
from .core.context import InvocationContext
from .core.directory import GuildDirectory
from .core.logs import setup_logging

__all__ = [
    "AdvancedUserArgument",
    "AdvancedUserMatch",
    "ArgumentDefinition",
    "ArgumentType",
    "ChannelArgument",
    "FloatArgument",
    "FuzzyMemberResolver",
    "IntegerArgument",
    "ParsedArgument",
    "SlashCommandOptions",
    "StringArgument",
    "UserArgument",
    "UserIDArgument",
    "parse_interaction_arguments",
    "parse_message_arguments",
    "slash_command_options",
    "InvocationContext",
    "GuildDirectory",
    "setup_logging",
]
