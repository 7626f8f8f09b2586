"""Slash option registration and argument-set parsing for commands."""

import logging
from typing import Any

import hikari
import lightbulb

from ..core.context import InvocationContext
from .argument_types import ArgumentDefinition, ParsedArgument, new_parsed_arguments
from .options import SlashCommandOptions
from .parsers import StringArgument

logger = logging.getLogger(__name__)


def slash_command_options(definitions: list[ArgumentDefinition]) -> list[hikari.CommandOption]:
    """All slash options of a command, in definition order."""
    options: list[hikari.CommandOption] = []
    for definition in definitions:
        options.extend(definition.type.slash_command_options(definition))
    return options


class OptionDescriptorFactory:
    """Factory for creating lightbulb option descriptors."""

    @staticmethod
    def create(option: hikari.CommandOption, default: Any = None) -> Any:
        """Create the lightbulb option descriptor for a slash option."""
        option_mapping = {
            hikari.OptionType.STRING: lightbulb.string,
            hikari.OptionType.INTEGER: lightbulb.integer,
            hikari.OptionType.BOOLEAN: lightbulb.boolean,
            hikari.OptionType.USER: lightbulb.user,
            hikari.OptionType.CHANNEL: lightbulb.channel,
            hikari.OptionType.ROLE: lightbulb.role,
            hikari.OptionType.MENTIONABLE: lightbulb.mentionable,
        }

        descriptor_func = option_mapping.get(option.type, lightbulb.string)
        return descriptor_func(option.name, option.description, default=default)


def option_descriptors(definitions: list[ArgumentDefinition]) -> dict[str, Any]:
    """Lightbulb descriptors for every option of a command, keyed by option name.

    Every option is optional: the two-option argument types only need one of
    their options filled in, and missing arguments keep their default.
    """
    descriptors: dict[str, Any] = {}
    for definition in definitions:
        for option in definition.type.slash_command_options(definition):
            descriptors[option.name] = OptionDescriptorFactory.create(option, definition.default)
    return descriptors


async def parse_message_arguments(
    definitions: list[ArgumentDefinition], parts: list[str], ctx: InvocationContext
) -> list[ParsedArgument]:
    """Parse prefix command tokens against the command's argument definitions.

    Tokens are consumed in order. A trailing string argument takes all the
    remaining text. An optional argument whose type doesn't match the current
    token keeps its default and leaves the token for the next argument.
    """
    parsed = new_parsed_arguments(definitions)
    index = 0

    for i, definition in enumerate(definitions):
        if index >= len(parts):
            break

        if isinstance(definition.type, StringArgument) and i == len(definitions) - 1:
            part = " ".join(parts[index:])
            index = len(parts)
        else:
            part = parts[index]
            if definition.default is not None and not definition.type.matches(definition, part):
                logger.debug(f"Skipping optional argument {definition.name} for {part!r}")
                continue
            index += 1

        value = await definition.type.parse_from_message(definition, part, ctx)
        parsed[i] = ParsedArgument(definition=definition, value=value, raw=part)

    if index < len(parts):
        logger.debug(f"Ignoring {len(parts) - index} extra argument(s)")

    return parsed


async def parse_interaction_arguments(
    definitions: list[ArgumentDefinition], ctx: InvocationContext, options: SlashCommandOptions
) -> list[ParsedArgument]:
    """Parse slash command options against the command's argument definitions.

    Arguments with none of their options present keep their default.
    """
    parsed = new_parsed_arguments(definitions)

    for i, definition in enumerate(definitions):
        names = definition.type.option_names(definition)
        if not any(name in options for name in names):
            logger.debug(f"No option given for argument {definition.name}, using default")
            continue

        value = await definition.type.parse_from_interaction(definition, ctx, options)
        parsed[i] = ParsedArgument(definition=definition, value=value)

    return parsed
