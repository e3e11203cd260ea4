import json
import logging
import shutil
import sys

import click
from rich.table import Table

from nethermind.cairo_decoder.cli.utils import (
    abi_json_option,
    cli_logger_config,
    group_options,
    load_abi_json,
    no_byte_array_heuristic_option,
    verbose_option,
)

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("cairo_decoder").getChild("cli")


@click.command("decode-result")
@group_options(abi_json_option, no_byte_array_heuristic_option, verbose_option)
@click.argument("function_name")
@click.argument("result", nargs=-1)
def decode_result(abi_json, no_byte_array_heuristic: bool, verbose: bool, function_name: str, result: tuple[str, ...]):
    """Decodes the RESULT felts returned by a call to FUNCTION_NAME"""
    from nethermind.cairo_decoder.decoding import FunctionResultDecoder
    from nethermind.cairo_decoder.exceptions import DecodingError, FunctionNotFound

    console = cli_logger_config(root_logger, verbose)

    decoder = FunctionResultDecoder.from_abi(
        load_abi_json(abi_json),
        byte_array_heuristic=not no_byte_array_heuristic,
    )

    try:
        decoded = decoder.decode(function_name, list(result))
    except FunctionNotFound as e:
        logger.error(e)
        console.print(f"[red]{e}")
        sys.exit(1)
    except DecodingError as e:
        console.print(f"[red]Failed to decode {function_name}: {e}")
        sys.exit(1)

    console.print_json(json.dumps(decoded))


@click.command("list-functions")
@group_options(abi_json_option, verbose_option)
def list_functions(abi_json, verbose: bool):
    """Prints the functions declared in an ABI"""
    from nethermind.cairo_decoder.decoding import build_catalog

    console = cli_logger_config(root_logger, verbose)
    catalog = build_catalog(load_abi_json(abi_json))

    term_width = shutil.get_terminal_size().columns
    function_table = Table(title="[bold magenta]ABI Functions", min_width=min(80, term_width), show_lines=True)

    function_table.add_column("Name")
    function_table.add_column("Inputs")
    function_table.add_column("Outputs")

    for func in catalog.functions:
        function_table.add_row(
            func.name,
            "\n".join(param.id_str() for param in func.inputs),
            "\n".join(param.id_str() for param in func.outputs),
        )

    console.print(function_table)
    console.print(
        f"{len(catalog.events)} Events, {len(catalog.structs)} Structs, {len(catalog.enums)} Enums, "
        f"{len(catalog.interfaces)} Interfaces"
    )
