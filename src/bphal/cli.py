"""
bphal CLI - Bus Pirate BPIO2 command line

Command-line interface using Click.
"""

import sys
import json
import logging
from dataclasses import asdict

import click

from . import __version__
from . import connection
from .config import Configuration, LinkSettings, PsuConfig
from .errors import BPIOError


def _parse_int(value: str) -> int:
    """Parse decimal or 0x-prefixed hex."""
    try:
        return int(value, 0)
    except ValueError:
        raise click.BadParameter(f"not a number: {value}")


def _parse_bytes(values) -> bytes:
    out = bytearray()
    for value in values:
        byte = _parse_int(value)
        if not 0 <= byte <= 0xFF:
            raise click.BadParameter(f"byte out of range: {value}")
        out.append(byte)
    return bytes(out)


def _open(ctx) -> connection.HiZ:
    settings: LinkSettings = ctx.obj['settings']
    if not settings.port:
        click.echo("No port given (use -p/--port or BPHAL_PORT)", err=True)
        sys.exit(1)
    return connection.open(settings.port, settings=settings)


def _fail(error: Exception):
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


# --------------------------------------------------------------------------
# CLI Group
# --------------------------------------------------------------------------

@click.group()
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (log every frame)')
@click.option('-p', '--port', envvar='BPHAL_PORT', help='BPIO2 serial port (e.g. /dev/ttyACM1)')
@click.option('-b', '--baudrate', envvar='BPHAL_BAUDRATE', type=int, default=115200,
              show_default=True, help='Serial baud rate')
@click.option('-t', '--timeout', envvar='BPHAL_TIMEOUT', type=float, default=1.0,
              show_default=True, help='Read timeout in seconds')
@click.pass_context
def cli(ctx, verbose, port, baudrate, timeout):
    """bphal - Bus Pirate BPIO2 host driver

    Talks to a Bus Pirate over its binary BPIO2 serial interface.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['settings'] = LinkSettings(port=port, baudrate=baudrate, timeout=timeout)


# --------------------------------------------------------------------------
# Device Commands
# --------------------------------------------------------------------------

@cli.command()
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
@click.pass_context
def status(ctx, as_json):
    """Show firmware, mode and power supply status."""
    try:
        with _open(ctx) as bp:
            info = bp.status()
    except BPIOError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(asdict(info), indent=2))
        return

    click.echo(f"Firmware:  {info.version_firmware_major}.{info.version_firmware_minor}"
               f" ({info.version_firmware_git_hash or '?'}, {info.version_firmware_date or '?'})")
    click.echo(f"Hardware:  {info.version_hardware_major} rev {info.version_hardware_minor}")
    click.echo(f"Protocol:  {info.version_flatbuffers_major}.{info.version_flatbuffers_minor}")
    click.echo(f"Mode:      {info.mode_current or '?'}"
               f" (available: {', '.join(info.modes_available) or 'none'})")
    click.echo(f"Max packet {info.mode_max_packet_size}, write {info.mode_max_write},"
               f" read {info.mode_max_read}")
    psu = "on" if info.psu_enabled else "off"
    click.echo(f"PSU:       {psu}, set {info.psu_set_mv} mV / {info.psu_set_ma} mA,"
               f" measured {info.psu_measured_mv} mV / {info.psu_measured_ma} mA")
    if info.psu_current_error:
        click.echo("  Over-current!")
    click.echo(f"Pull-ups:  {'on' if info.pullup_enabled else 'off'}")
    click.echo(f"IO:        dir 0x{info.io_direction:02x}, value 0x{info.io_value:02x}")
    if info.adc_mv:
        click.echo(f"ADC (mV):  {' '.join(str(mv) for mv in info.adc_mv)}")


@cli.command()
@click.pass_context
def selftest(ctx):
    """Run the hardware self-test."""
    try:
        with _open(ctx) as bp:
            bp.selftest()
    except BPIOError as e:
        _fail(e)
    click.echo("Self-test passed")


@cli.command()
@click.option('--psu/--no-psu', default=None, help='Enable or disable the power supply')
@click.option('--voltage', type=int, help='PSU voltage in mV')
@click.option('--current', type=int, help='PSU current limit in mA')
@click.option('--pullups/--no-pullups', default=None, help='Enable or disable pull-up resistors')
@click.option('--led-resume', is_flag=True, help='Return LEDs to firmware control')
@click.option('--print', 'message', help='Show a string on the Bus Pirate terminal')
@click.pass_context
def config(ctx, psu, voltage, current, pullups, led_resume, message):
    """Change power supply, pull-up and LED settings."""
    psu_config = None
    if psu is not None or voltage is not None or current is not None:
        psu_config = PsuConfig(enable=psu, millivolts=voltage, milliamps=current)

    settings = Configuration(
        psu=psu_config,
        pullup=pullups,
        led_resume=True if led_resume else None,
        print_string=message,
    )
    if not settings.fields():
        click.echo("Nothing to configure", err=True)
        sys.exit(1)

    try:
        with _open(ctx) as bp:
            bp.configure(settings)
    except BPIOError as e:
        _fail(e)
    click.echo("Configuration applied")


# --------------------------------------------------------------------------
# I2C Commands
# --------------------------------------------------------------------------

@cli.group()
@click.option('--speed', default=400000, show_default=True, help='I2C clock in Hz')
@click.option('--clock-stretch', is_flag=True, help='Allow clock stretching')
@click.pass_context
def i2c(ctx, speed, clock_stretch):
    """I2C bus operations."""
    ctx.obj['i2c'] = dict(speed=speed, clock_stretch=clock_stretch)


@i2c.command('read')
@click.argument('address')
@click.argument('length', type=int)
@click.pass_context
def i2c_read(ctx, address, length):
    """Read LENGTH bytes from ADDRESS."""
    address = _parse_int(address)
    try:
        with _open(ctx) as bp:
            data = bp.enter_i2c(**ctx.obj['i2c']).read(address, length)
    except (BPIOError, ValueError) as e:
        _fail(e)
    click.echo(data.hex(' '))


@i2c.command('write')
@click.argument('address')
@click.argument('data', nargs=-1, required=True)
@click.pass_context
def i2c_write(ctx, address, data):
    """Write DATA bytes to ADDRESS."""
    address = _parse_int(address)
    payload = _parse_bytes(data)
    try:
        with _open(ctx) as bp:
            bp.enter_i2c(**ctx.obj['i2c']).write(address, payload)
    except (BPIOError, ValueError) as e:
        _fail(e)
    click.echo(f"Wrote {len(payload)} bytes to 0x{address:02x}")


@i2c.command('write-read')
@click.argument('address')
@click.argument('length', type=int)
@click.argument('data', nargs=-1, required=True)
@click.pass_context
def i2c_write_read(ctx, address, length, data):
    """Write DATA to ADDRESS, then read LENGTH bytes back."""
    address = _parse_int(address)
    payload = _parse_bytes(data)
    try:
        with _open(ctx) as bp:
            result = bp.enter_i2c(**ctx.obj['i2c']).write_read(address, payload, length)
    except (BPIOError, ValueError) as e:
        _fail(e)
    click.echo(result.hex(' '))


# --------------------------------------------------------------------------
# SPI Commands
# --------------------------------------------------------------------------

@cli.group()
@click.option('--speed', default=1000000, show_default=True, help='SPI clock in Hz')
@click.option('--data-bits', default=8, show_default=True, help='Bits per word')
@click.pass_context
def spi(ctx, speed, data_bits):
    """SPI bus operations."""
    ctx.obj['spi'] = dict(speed=speed, data_bits=data_bits)


@spi.command('read')
@click.argument('length', type=int)
@click.pass_context
def spi_read(ctx, length):
    """Read LENGTH bytes."""
    try:
        with _open(ctx) as bp:
            data = bp.enter_spi(**ctx.obj['spi']).read(length)
    except (BPIOError, ValueError) as e:
        _fail(e)
    click.echo(data.hex(' '))


@spi.command('write')
@click.argument('data', nargs=-1, required=True)
@click.pass_context
def spi_write(ctx, data):
    """Write DATA bytes."""
    payload = _parse_bytes(data)
    try:
        with _open(ctx) as bp:
            bp.enter_spi(**ctx.obj['spi']).write(payload)
    except BPIOError as e:
        _fail(e)
    click.echo(f"Wrote {len(payload)} bytes")


@spi.command('transfer')
@click.option('-r', '--read-length', type=int, default=0, show_default=True,
              help='Bytes to clock in')
@click.argument('data', nargs=-1, required=True)
@click.pass_context
def spi_transfer(ctx, read_length, data):
    """Clock out DATA while clocking in READ_LENGTH bytes."""
    payload = _parse_bytes(data)
    try:
        with _open(ctx) as bp:
            result = bp.enter_spi(**ctx.obj['spi']).transfer(payload, read_length)
    except (BPIOError, ValueError) as e:
        _fail(e)
    click.echo(result.hex(' ') if result else "(no data)")


# --------------------------------------------------------------------------
# Entry Point
# --------------------------------------------------------------------------

def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
