# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Built-in value types used to validate and convert raw command-line strings.

Each value type pairs a registry name (e.g. `INT`, `EMAIL`) with a validator
function of the shape `str -> value`. A validator either returns the converted
value or raises `ValidationError` describing the format mismatch.

Types:
- STRING, INT, FLOAT, BOOL, FIXED: scalar values.
- DATE, DATETIME, TIME, INTERVAL: temporal values.
- EMAIL, URL, DOMAIN, IP_ADDR, MAC_ADDR, UUID: network and identifier formats.
- INFILE, OUTFILE, DIR: file system locations.

Custom types can be registered on a `TypeRegistry` with any callable that
raises `ValidationError`, `ValueError` or `TypeError` on bad input.
"""
from __future__ import annotations

import ipaddress
import os
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

import pydantic
from dateutil import parser as date_parser
from email_validator import EmailNotValidError
from email_validator import validate_email as email_validator_validate
from pydantic import AnyUrl, TypeAdapter

from posixopt.exceptions import ValidationError

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_PATTERN = re.compile(r"(\d{2}):(\d{2})(?::(\d{2}))?")
_INTERVAL_PATTERN = re.compile(
    r"P(?=\d|T\d)(\d+Y)?(\d+M)?(\d+W)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+S)?)?"
)
_LABEL_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")
_MAC_PATTERN = re.compile(r"([0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}")
_UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)

_URL_ADAPTER = TypeAdapter(AnyUrl)

TRUTHY = frozenset({"true", "1", "yes", "on"})
FALSY = frozenset({"false", "0", "no", "off", ""})


@dataclass(frozen=True)
class ValueType:
    """
    A named validator registered in a `TypeRegistry`.

    Attributes:
        name (str): Registry key, conventionally upper case (e.g. "INT").
        validator (Callable[[str], Any]): Converts a raw string to a typed value.
        description (str): Short text used in help output.
    """

    name: str
    validator: Callable[[str], Any]
    description: str = ""

    def validate(self, value: str) -> Any:
        """
        Validate and convert `value`.

        `ValueError` and `TypeError` raised by custom validators are reported as
        `ValidationError` so callers only ever see posixopt exceptions.
        """
        try:
            return self.validator(value)
        except (ValueError, TypeError) as error:
            raise ValidationError(
                f"Invalid {self.name.lower()}: {value} ({error})"
            ) from error


def validate_string(value: str) -> str:
    return value


def validate_int(value: str) -> int:
    if not _INT_PATTERN.fullmatch(value):
        raise ValidationError(f"Invalid integer: {value}")
    return int(value)


def validate_float(value: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValidationError(f"Invalid float: {value}")
    return float(value)


def validate_bool(value: str) -> bool:
    """Accepts true/1/yes/on and false/0/no/off/empty, case-insensitively."""
    normalized = value.strip().lower()
    if normalized in TRUTHY:
        return True
    if normalized in FALSY:
        return False
    raise ValidationError(f"Invalid boolean: {value}")


def validate_date(value: str) -> str:
    if not _DATE_PATTERN.fullmatch(value):
        raise ValidationError(f"Invalid date format (YYYY-MM-DD): {value}")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"Invalid date: {value}") from None
    return value


def validate_datetime(value: str) -> str:
    if not value.strip():
        raise ValidationError(f"Invalid datetime: {value}")
    try:
        date_parser.parse(value)
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid datetime: {value}") from None
    return value


def validate_time(value: str) -> str:
    match = _TIME_PATTERN.fullmatch(value)
    if not match:
        raise ValidationError(f"Invalid time format (HH:MM or HH:MM:SS): {value}")
    hours, minutes, seconds = match.groups()
    if int(hours) > 23 or int(minutes) > 59 or int(seconds or 0) > 59:
        raise ValidationError(f"Invalid time: {value}")
    return value


def validate_interval(value: str) -> str:
    """Validate an ISO-8601 duration such as `P1Y2M`, `PT30M` or `P2W`."""
    if not _INTERVAL_PATTERN.fullmatch(value):
        raise ValidationError(f"Invalid interval: {value}")
    return value


def validate_email(value: str) -> str:
    try:
        email_validator_validate(value, check_deliverability=False)
    except EmailNotValidError as error:
        raise ValidationError(f"Invalid email: {value} ({error})") from error
    return value


def validate_url(value: str) -> str:
    """Absolute URL whose host is a valid hostname or IP address."""
    if value != value.strip() or " " in value:
        raise ValidationError(f"Invalid URL: {value}")
    try:
        url = _URL_ADAPTER.validate_python(value)
    except pydantic.ValidationError as error:
        raise ValidationError(f"Invalid URL: {value}") from error
    if not _is_host(url.host or ""):
        raise ValidationError(f"Invalid URL: {value}")
    return value


def _is_hostname(value: str) -> bool:
    return (
        bool(value)
        and len(value) <= 253
        and all(_LABEL_PATTERN.fullmatch(label) for label in value.split("."))
    )


def _is_host(value: str) -> bool:
    if value.startswith("[") and value.endswith("]"):
        value = value[1:-1]
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return _is_hostname(value)
    return True


def validate_domain(value: str) -> str:
    if not _is_hostname(value):
        raise ValidationError(f"Invalid domain: {value}")
    return value


def validate_ip_addr(value: str) -> str:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        raise ValidationError(f"Invalid IP address: {value}") from None
    return value


def validate_mac_addr(value: str) -> str:
    if not _MAC_PATTERN.fullmatch(value):
        raise ValidationError(f"Invalid MAC address: {value}")
    return value


def validate_uuid(value: str) -> str:
    if not _UUID_PATTERN.fullmatch(value):
        raise ValidationError(f"Invalid UUID: {value}")
    return value


def validate_infile(value: str) -> str:
    if not os.path.isfile(value) or not os.access(value, os.R_OK):
        raise ValidationError(f"File not found or not readable: {value}", exit_code=1)
    return value


def validate_outfile(value: str) -> str:
    directory = os.path.dirname(value) or "."
    if not os.path.isdir(directory) or not os.access(directory, os.W_OK):
        raise ValidationError(f"Directory not writable for output file: {directory}")
    return value


def validate_dir(value: str) -> str:
    if not os.path.isdir(value) or not os.access(value, os.R_OK):
        raise ValidationError(
            f"Directory not found or not readable: {value}", exit_code=1
        )
    return value


def validate_fixed(value: str) -> str:
    """Fixed-point numbers may use `,` as a thousands separator."""
    if not _FLOAT_PATTERN.fullmatch(value.replace(",", "")):
        raise ValidationError(f"Invalid fixed-point number: {value}")
    return value


BUILTIN_TYPES: tuple[ValueType, ...] = (
    ValueType("STRING", validate_string, "any text"),
    ValueType("INT", validate_int, "whole number"),
    ValueType("FLOAT", validate_float, "decimal number"),
    ValueType("BOOL", validate_bool, "true/false, yes/no, on/off, 1/0"),
    ValueType("DATE", validate_date, "date as YYYY-MM-DD"),
    ValueType("DATETIME", validate_datetime, "date and time"),
    ValueType("TIME", validate_time, "time as HH:MM or HH:MM:SS"),
    ValueType("INTERVAL", validate_interval, "ISO-8601 duration"),
    ValueType("EMAIL", validate_email, "email address"),
    ValueType("URL", validate_url, "URL with scheme and host"),
    ValueType("DOMAIN", validate_domain, "domain name"),
    ValueType("IP_ADDR", validate_ip_addr, "IPv4 or IPv6 address"),
    ValueType("MAC_ADDR", validate_mac_addr, "MAC address"),
    ValueType("UUID", validate_uuid, "UUID"),
    ValueType("INFILE", validate_infile, "readable input file"),
    ValueType("OUTFILE", validate_outfile, "writable output file"),
    ValueType("DIR", validate_dir, "readable directory"),
    ValueType("FIXED", validate_fixed, "fixed-point number"),
)
