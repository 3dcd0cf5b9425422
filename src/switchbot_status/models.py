"""
Response models for the SwitchBot API.

Containers (the device list, the status body, the first device id) are
mandatory and raise ShapeError when absent or mistyped. Leaf status fields
fall back to defaults instead.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from .errors import DecodeError, ShapeError

NOT_AVAILABLE = "N/A"
SUCCESS_STATUS_CODE = 100


class Envelope(BaseModel):
    """Fields shared by every SwitchBot API response."""

    status_code: Any = Field(default=None, alias="statusCode", description="Vendor status code, 100 on success")
    message: Any = Field(default=None, description="Vendor status message")

    @property
    def is_success(self) -> bool:
        return self.status_code is None or self.status_code == SUCCESS_STATUS_CODE


class DeviceListBody(BaseModel):
    device_list: List[Any] = Field(alias="deviceList", description="Physical devices on the account")


class DeviceListResponse(Envelope):
    """Response of GET /devices."""

    body: DeviceListBody


class Device(BaseModel):
    """A device record; only the id is consumed."""

    device_id: StrictStr = Field(alias="deviceId")


class DeviceStatusResponse(Envelope):
    """Response of GET /devices/{deviceId}/status."""

    body: Dict[str, Any]


class DeviceStatus(BaseModel):
    """Status fields reported for a device, each decoded or defaulted."""

    model_config = ConfigDict(populate_by_name=True)

    device_id: str = Field(default=NOT_AVAILABLE, alias="deviceId")
    device_type: str = Field(default=NOT_AVAILABLE, alias="deviceType")
    hub_device_id: str = Field(default=NOT_AVAILABLE, alias="hubDeviceId")
    humidity: float = 0.0
    temperature: float = 0.0

    @field_validator("device_id", "device_type", "hub_device_id", mode="before")
    @classmethod
    def _string_or_default(cls, value: Any) -> str:
        return value if isinstance(value, str) else NOT_AVAILABLE

    @field_validator("humidity", "temperature", mode="before")
    @classmethod
    def _number_or_default(cls, value: Any) -> float:
        # bool is an int subclass but not a JSON number
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0.0
        try:
            return float(value)
        except OverflowError:
            return 0.0


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    )


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid JSON literal {name}")


def decode_json(raw: bytes) -> Optional[Dict[str, Any]]:
    """
    Parse a raw response body as a JSON object

    Returns:
        The decoded object, or None for a literal null

    Raises:
        DecodeError: If the body is not valid JSON or its top level is not an object
    """
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        # covers JSONDecodeError, UnicodeDecodeError and the int digit limit
        raise DecodeError(str(e)) from e

    if data is not None and not isinstance(data, dict):
        raise DecodeError(f"cannot decode JSON {type(data).__name__} into an object")
    return data


def parse_device_list(raw: bytes) -> DeviceListResponse:
    """
    Parse the /devices response

    Returns:
        DeviceListResponse whose body.device_list may be empty

    Raises:
        DecodeError: If the body is not valid JSON
        ShapeError: If body.deviceList is absent or not a list
    """
    data = decode_json(raw)
    try:
        return DeviceListResponse.model_validate(data)
    except ValidationError as e:
        raise ShapeError(f"device list is missing or not in expected format ({_describe(e)})") from e


def first_device_id(devices: List[Any]) -> str:
    """
    Return the id of the first device in a non-empty device list

    Raises:
        ShapeError: If the first entry is not an object with a string deviceId
    """
    try:
        return Device.model_validate(devices[0]).device_id
    except ValidationError as e:
        raise ShapeError(f"first device is missing or not in expected format ({_describe(e)})") from e


def parse_device_status(raw: bytes) -> DeviceStatusResponse:
    """
    Parse the /devices/{deviceId}/status response

    Raises:
        DecodeError: If the body is not valid JSON
        ShapeError: If body is absent or not an object
    """
    data = decode_json(raw)
    try:
        return DeviceStatusResponse.model_validate(data)
    except ValidationError as e:
        raise ShapeError("response body is missing or not in expected format.") from e


def extract_status(body: Optional[Dict[str, Any]]) -> DeviceStatus:
    """Decode the five reported fields, defaulting any missing or mistyped one."""
    return DeviceStatus.model_validate(body or {})
