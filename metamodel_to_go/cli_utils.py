"""
CLI utilities for recording how generated files were produced.
"""

from pathlib import Path

import click

PROGRAM_NAME = "metamodel_to_go"


def _display_value(param: click.Parameter, value) -> str:
    """Paths are shown by file name only."""
    if isinstance(param.type, click.Path):
        return Path(str(value)).name
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct the command line from the current Click context.

    Arguments come first, then options that differ from their defaults.
    Boolean flags are shown without a value.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line, or the bare program name outside a Click context
    """
    try:
        ctx = click.get_current_context()
    except RuntimeError:
        return PROGRAM_NAME

    params = ctx.params
    arguments = []
    options = []

    for param in click_command.params:
        if param.name not in params:
            continue
        value = params[param.name]
        if value is None or value is False:
            continue

        if isinstance(param, click.Argument):
            arguments.append(_display_value(param, value))
        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _display_value(param, value)])

    return " ".join([PROGRAM_NAME, *arguments, *options])
