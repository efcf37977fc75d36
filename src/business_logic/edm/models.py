from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class FuelFlowUnits(Enum):
    GPH = "GPH"
    PPH = "PPH"
    LPH = "LPH"
    KPH = "KPH"


class TempUnits(Enum):
    FAHRENHEIT = "F"
    CELSIUS = "C"


@dataclass(frozen=True)
class Alarms:
    """Alarm limits from the `$A` line. Volts are already scaled to volts."""
    volts_max: float
    volts_min: float
    egt_spread_max: int
    cht_max: int
    cht_cool_rate_max: int
    egt_max: int
    oil_temp_max: int
    oil_temp_min: int


@dataclass(frozen=True)
class Fuel:
    flow_units: FuelFlowUnits
    full_level: int
    warning_level: int
    k_factor_ff1: int
    k_factor_ff2: int


@dataclass(frozen=True)
class Sensors:
    egt_count: int
    cht_count: int
    volts: bool = False
    oil_temp: bool = False
    tit1: bool = False
    tit2: bool = False
    oat: bool = False
    fuel_flow: bool = False
    iat: bool = False
    cdt: bool = False
    map: bool = False
    rpm: bool = False


@dataclass(frozen=True)
class Features:
    model: int
    firmware_version: int
    sensors: Sensors
    engine_temperature_unit: TempUnits


@dataclass(frozen=True)
class HeaderRecord:
    """
    Decoded header of one EDM file.
    A field is None until a line carrying it decodes completely.
    fuel, features, download_time and protocol_version have no decoder yet.
    """
    registration: Optional[str] = None
    alarms: Optional[Alarms] = None
    fuel: Optional[Fuel] = None
    features: Optional[Features] = None
    download_time: Optional[int] = None
    protocol_version: Optional[int] = None


@dataclass(frozen=True)
class HeaderLine:
    line_no: int
    offset: int
    text: str
    tag: Optional[str]


@dataclass(frozen=True)
class LineWarning:
    line_no: int
    offset: int
    tag: Optional[str]
    code: str
    message: str


@dataclass(frozen=True)
class HeaderDecodeResult:
    record: HeaderRecord
    header_end: int
    warnings: Tuple[LineWarning, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.warnings
