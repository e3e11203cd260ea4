import click

from nethermind.cairo_decoder.cli.decode import decode_result, list_functions


@click.group()
def cairo_decoder_cli():
    """Command Line Interface for Decoding Starknet Call Results"""


cairo_decoder_cli.add_command(decode_result, name="decode-result")
cairo_decoder_cli.add_command(list_functions, name="list-functions")
