from __future__ import annotations
from dataclasses import asdict, dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Any, Dict, Mapping, Union
import json

from creational.core.exceptions import ConfigurationError, DocumentParseError

IPAddress = Union[IPv4Address, IPv6Address]

MAX_PORT = 65535
MAX_AGE = 65535


###############################################################################
# 1. DEVICE FAMILY CONFIG -----------------------------------------------------
###############################################################################

@dataclass(frozen=True, slots=True)
class DeviceFamilyConfig:
    """Immutable vendor configuration shared by every device of one family."""
    brand: str
    address: IPAddress
    port: int

    # ---------- factory --------------------------------------------------- #
    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DeviceFamilyConfig":
        try:
            brand = row["brand"]
            address = _parse_address(row["address"])
            port = _parse_port(row["port"])
        except KeyError as e:
            raise ConfigurationError(f"Device family config is missing {e}") from e
        return cls(brand=str(brand), address=address, port=port)

    def endpoint(self) -> str:
        """Human-readable `address:port`, bracketing IPv6 addresses."""
        if self.address.version == 6:
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"


###############################################################################
# 2. DOCUMENT RECORD ----------------------------------------------------------
###############################################################################

@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """The single normalized record parsed from a CSV or JSON source."""
    name: str
    age: int

    # ---------- factory --------------------------------------------------- #
    @classmethod
    def from_row(cls, row: Mapping[str, Any], coerce: bool = False) -> "DocumentRecord":
        """Build a record from a parsed row.

        With ``coerce`` set (text formats such as CSV) the age is converted
        from its string form; otherwise it must already be an integer.
        """
        missing = [key for key in ("name", "age") if key not in row]
        if missing:
            raise DocumentParseError(f"missing field(s): {', '.join(missing)}")

        name, age = row["name"], row["age"]
        if not isinstance(name, str):
            raise DocumentParseError(f"invalid type for 'name': expected string, got {type(name).__name__}")
        if coerce and isinstance(age, str):
            try:
                age = int(age)
            except ValueError as e:
                raise DocumentParseError(f"invalid value for 'age': {row['age']!r}") from e
        return cls(name=name, age=_check_age(age))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


###############################################################################
# 3. HELPER PARSERS -----------------------------------------------------------
###############################################################################

def _parse_address(value: Any) -> IPAddress:
    """Accept address objects or their string form."""
    if isinstance(value, (IPv4Address, IPv6Address)):
        return value
    try:
        return ip_address(str(value).strip())
    except ValueError as e:
        raise ConfigurationError(f"Invalid device address: {value!r}") from e

def _parse_port(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid device port: {value!r}")
    try:
        port = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid device port: {value!r}") from e
    if not 0 <= port <= MAX_PORT:
        raise ConfigurationError(f"Device port out of range 0-{MAX_PORT}: {port}")
    return port

def _check_age(value: Any) -> int:
    # bool is an int subclass; JSON `true` is not an age
    if isinstance(value, bool) or not isinstance(value, int):
        raise DocumentParseError(f"invalid type for 'age': expected integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_AGE:
        raise DocumentParseError(f"'age' out of range 0-{MAX_AGE}: {value}")
    return value
