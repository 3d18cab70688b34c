#!/usr/bin/env python3
"""
account_address.cli
===================

Small operator tool around the address codec.

Usage
-----
account-address normalize 0x0000000000000000000000000000000000000000000000000000000000000001
account-address normalize 0x10 --long
account-address validate a550c18 --require-long-unless-special --json
account-address encode 0x1
account-address decode 0x000000000000000000000000000000000000000000000000000000000000000a

Strictness flags (env overrides in parentheses)
-----------------------------------------------
--require-0x                    (ACCOUNT_ADDRESS_REQUIRE_0X)
--require-long                  (ACCOUNT_ADDRESS_REQUIRE_LONG)
--require-long-unless-special   (ACCOUNT_ADDRESS_REQUIRE_LONG_UNLESS_SPECIAL)

Exit status is 0 on success and 1 when the input is rejected.
"""

from __future__ import annotations

import json
from typing import NoReturn, Optional

import typer

from account_address import logging as alog
from account_address.address import AccountAddress
from account_address.bcs import from_bcs_bytes, to_bcs_bytes
from account_address.errors import CodecError
from account_address.hexutil import from_hex, to_hex
from account_address.options import ValidityOptions
from account_address.parser import from_str, is_valid_with_reason
from account_address.version import __version__

app = typer.Typer(
    name="account-address",
    help="Parse, validate and encode 32-byte account addresses (AIP-40).",
    no_args_is_help=True,
    add_completion=False,
)

log = alog.get_logger(__name__)


# ----------------- shared options -----------------

RequireZeroX = typer.Option(
    False,
    "--require-0x",
    help="Reject input without a leading 0x.",
    envvar="ACCOUNT_ADDRESS_REQUIRE_0X",
)
RequireLong = typer.Option(
    False,
    "--require-long",
    help="Reject anything but the 64-character long form.",
    envvar="ACCOUNT_ADDRESS_REQUIRE_LONG",
)
RequireLongUnlessSpecial = typer.Option(
    False,
    "--require-long-unless-special",
    help="Reject short forms unless the address is special (0x0..0xf).",
    envvar="ACCOUNT_ADDRESS_REQUIRE_LONG_UNLESS_SPECIAL",
)


def _options(require_0x: bool, require_long: bool, unless_special: bool) -> ValidityOptions:
    return ValidityOptions(
        require_leading_zero_x=require_0x,
        require_long_form=require_long,
        require_long_form_unless_special=unless_special,
    )


def _fail(err: CodecError) -> NoReturn:
    log.warning("rejected input", extra={"code": err.code})
    typer.echo(f"error: {err.message}", err=True)
    raise typer.Exit(code=1)


# ----------------- commands -----------------


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Minimum log level (DEBUG, INFO, WARNING, ERROR).",
        envvar=alog.ENV_LOG_LEVEL,
    ),
    log_json: Optional[bool] = typer.Option(
        None,
        "--log-json/--log-text",
        help="Force JSON or text log lines (default: env / TTY detection).",
    ),
) -> None:
    alog.configure(json=log_json, level=log_level)
    alog.bind(component="cli")


@app.command()
def version() -> None:
    """Print the package version."""
    typer.echo(__version__)


@app.command()
def normalize(
    address: str = typer.Argument(..., help="Address in long or short form."),
    long: bool = typer.Option(False, "--long", help="Print the 64-character long form."),
    require_0x: bool = RequireZeroX,
    require_long: bool = RequireLong,
    unless_special: bool = RequireLongUnlessSpecial,
) -> None:
    """Print the canonical form of ADDRESS."""
    alog.bind(command="normalize")
    try:
        addr = from_str(address, _options(require_0x, require_long, unless_special))
    except CodecError as e:
        _fail(e)
    typer.echo(addr.to_string_long() if long else addr.to_string())


@app.command()
def validate(
    address: str = typer.Argument(..., help="Address to check."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    require_0x: bool = RequireZeroX,
    require_long: bool = RequireLong,
    unless_special: bool = RequireLongUnlessSpecial,
) -> None:
    """Check ADDRESS and explain why it is rejected."""
    alog.bind(command="validate")
    report = is_valid_with_reason(
        address, _options(require_0x, require_long, unless_special)
    )
    if as_json:
        typer.echo(json.dumps(report.to_dict(), sort_keys=True))
    elif report.valid:
        typer.echo("valid")
    else:
        code = report.invalid_reason_code.value if report.invalid_reason_code else "hex_decode"
        typer.echo(f"invalid ({code}): {report.invalid_reason}")
    if not report.valid:
        raise typer.Exit(code=1)


@app.command()
def encode(
    address: str = typer.Argument(..., help="Address to encode."),
) -> None:
    """Print the 32-byte wire encoding of ADDRESS as 0x-hex."""
    alog.bind(command="encode")
    try:
        addr = from_str(address)
    except CodecError as e:
        _fail(e)
    typer.echo(to_hex(to_bcs_bytes(addr)))


@app.command()
def decode(
    wire_hex: str = typer.Argument(..., help="Wire bytes as hex (optional 0x)."),
) -> None:
    """Decode 32 wire bytes and print the canonical address."""
    alog.bind(command="decode")
    try:
        addr = from_bcs_bytes(AccountAddress, from_hex(wire_hex))
    except CodecError as e:
        _fail(e)
    typer.echo(addr.to_string())


if __name__ == "__main__":  # pragma: no cover
    app()
