import json
import logging
import os
from logging import Logger

import click
from rich.console import Console
from rich.logging import RichHandler

from nethermind.cairo_decoder.types.abi import AbiJson

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("cairo_decoder").getChild("cli")


def cli_logger_config(instrument_logger: Logger, verbose: bool = False) -> Console:
    rich_console = Console()
    instrument_logger.handlers.clear()

    instrument_logger.addHandler(RichHandler(show_path=False, console=rich_console))
    instrument_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return rich_console


def group_options(*options):
    """Decorator to group multiple click options together"""

    def wrapper(function):
        for option in reversed(options):
            function = option(function)
        return function

    return wrapper


def load_abi_json(abi_file) -> AbiJson:
    """
    Loads ABI entries from an open JSON file.  Accepts a bare list of ABI entries, or a contract class returned by
    starknet_getClass, where the abi is stored under the ``abi`` key as a list or a JSON encoded string
    """
    try:
        abi_data = json.loads(abi_file.read())

        if isinstance(abi_data, dict):
            abi_data = abi_data.get("abi", [])
        if isinstance(abi_data, str):
            abi_data = json.loads(abi_data)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"ABI file is not valid JSON: {e}", param_hint="--abi-json") from e

    if not isinstance(abi_data, list):
        raise click.BadParameter("ABI JSON must be a list of ABI entries", param_hint="--abi-json")
    return abi_data


# -------------------------------------------------------
#    CLI Configurations
# -------------------------------------------------------
abi_json_option = click.option(
    "--abi-json",
    "-abi",
    "abi_json",
    type=click.File("r"),
    default=os.environ.get("CAIRO_ABI_JSON"),
    required=True,
    help="Path to the contract ABI JSON.  If not provided, will use the CAIRO_ABI_JSON environment variable",
)
no_byte_array_heuristic_option = click.option(
    "--no-byte-array-heuristic",
    "no_byte_array_heuristic",
    is_flag=True,
    default=False,
    help="If provided, felt outputs are always decoded as a single hex felt, and never as a ByteArray",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    default=False,
    help="Enables debug logging",
)
