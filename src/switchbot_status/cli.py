#!/usr/bin/env python3
"""Print the status of the first device on a SwitchBot account."""

import argparse
import logging
from typing import Optional, Sequence

from dotenv import load_dotenv

from .client import SwitchBotClient
from .config import BASE_URL_ENV, SECRET_ENV, TOKEN_ENV, load_credentials, resolve_base_url
from .errors import ConfigError, DecodeError, ShapeError, SwitchBotError
from .models import (
    DeviceStatus,
    Envelope,
    extract_status,
    first_device_id,
    parse_device_list,
    parse_device_status,
)

logger = logging.getLogger(__name__)

DEVICES_ENDPOINT = "/devices"
STATUS_ENDPOINT = "/devices/{deviceId}/status"


def _abort(message: str) -> None:
    logger.error(message)
    print(message)


def _check_envelope(endpoint: str, envelope: Envelope) -> None:
    if not envelope.is_success:
        logger.warning(
            f"{endpoint} returned statusCode={envelope.status_code} message={envelope.message!r}"
        )


def format_report(status: DeviceStatus) -> str:
    """Render the status fields as labeled lines."""
    return "\n".join([
        f"Device ID: {status.device_id}",
        f"Device Type: {status.device_type}",
        f"Hub Device ID: {status.hub_device_id}",
        f"Humidity: {status.humidity:.2f}",
        f"Temperature: {status.temperature:.2f}°C",
    ])


def run(client: SwitchBotClient) -> Optional[DeviceStatus]:
    """
    List devices, fetch the status of the first one and print it.

    Every failure prints a diagnostic and stops the run.

    Returns:
        The reported DeviceStatus, or None if the run stopped early
    """
    try:
        raw_devices = client.get_devices()
    except SwitchBotError as e:
        _abort(f"Error calling {DEVICES_ENDPOINT} API: {e}")
        return None

    print(f"Response from {DEVICES_ENDPOINT}: {raw_devices.decode('utf-8', errors='replace')}")

    try:
        devices_response = parse_device_list(raw_devices)
    except DecodeError as e:
        _abort(f"Error unmarshalling {DEVICES_ENDPOINT} response: {e}")
        return None
    except ShapeError as e:
        _abort(f"Error: {e}")
        return None

    _check_envelope(DEVICES_ENDPOINT, devices_response)

    devices = devices_response.body.device_list
    if not devices:
        print("No devices found.")
        return None

    if len(devices) > 1:
        logger.debug(f"{len(devices)} devices found, using the first one")

    try:
        device_id = first_device_id(devices)
    except ShapeError as e:
        _abort(f"Error: {e}")
        return None

    print(f"Using deviceId: {device_id}")

    try:
        raw_status = client.get_device_status(device_id)
    except SwitchBotError as e:
        _abort(f"Error calling {STATUS_ENDPOINT} API: {e}")
        return None

    print(f"Response from {STATUS_ENDPOINT}: {raw_status.decode('utf-8', errors='replace')}")

    try:
        status_response = parse_device_status(raw_status)
    except DecodeError as e:
        _abort(f"Error unmarshalling {STATUS_ENDPOINT} response: {e}")
        return None
    except ShapeError as e:
        _abort(f"Error: {e}")
        return None

    _check_envelope(STATUS_ENDPOINT, status_response)

    status = extract_status(status_response.body)
    print(format_report(status))
    return status


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Show the status of the first SwitchBot device on your account",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Credentials are read from {TOKEN_ENV} and {SECRET_ENV}
(a .env file in the working directory is honored).

Examples:
  %(prog)s
  %(prog)s --verbose
  %(prog)s --base-url https://api.switch-bot.com/v1.1
"""
    )
    parser.add_argument(
        '--base-url',
        help=f'API base URL (overrides {BASE_URL_ENV})'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Exported variables win over .env
    load_dotenv()

    try:
        credentials = load_credentials()
    except ConfigError as e:
        _abort(str(e))
        return

    base_url = resolve_base_url(args.base_url)
    logger.debug(f"Using API base URL {base_url}")

    with SwitchBotClient(credentials, base_url=base_url) as client:
        run(client)


if __name__ == "__main__":
    main()
