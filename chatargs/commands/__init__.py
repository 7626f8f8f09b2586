"""Argument system for chat commands."""

from .argument_types import (
    AdvancedUserMatch,
    ArgumentDefinition,
    ParsedArgument,
    new_parsed_arguments,
)
from .options import SlashCommandOptions
from .parsers import (
    ADV_USER,
    ADV_USER_NO_MEMBER,
    BIG_INT,
    CHANNEL,
    FLOAT,
    INT,
    STRING,
    USER,
    USER_ID,
    USER_REQ_MENTION,
    AdvancedUserArgument,
    ArgumentType,
    ChannelArgument,
    FloatArgument,
    IntegerArgument,
    StringArgument,
    UserArgument,
    UserIDArgument,
)
from .search import FuzzyMemberResolver

__all__ = [
    "AdvancedUserMatch",
    "ArgumentDefinition",
    "ParsedArgument",
    "new_parsed_arguments",
    "SlashCommandOptions",
    "ArgumentType",
    "IntegerArgument",
    "FloatArgument",
    "StringArgument",
    "UserArgument",
    "UserIDArgument",
    "ChannelArgument",
    "AdvancedUserArgument",
    "INT",
    "BIG_INT",
    "FLOAT",
    "STRING",
    "USER",
    "USER_REQ_MENTION",
    "USER_ID",
    "CHANNEL",
    "ADV_USER",
    "ADV_USER_NO_MEMBER",
    "FuzzyMemberResolver",
]
