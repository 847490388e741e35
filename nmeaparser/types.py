"""NMEA data types for decoded sentences.

This module defines one dataclass per supported sentence type.

Design Decisions:
    1. Frozen dataclasses: a decoded record is a snapshot of one sentence and
       is never modified after construction. Sequences (satellite IDs and
       satellite entries) are tuples for the same reason.

    2. Defaults instead of None: optional fields that were empty or absent
       hold 0, 0.0, "" or a fallback character. Fields that cannot be
       defaulted (coordinates, timestamps, dates) reject the whole sentence
       at decode time instead.

    3. Separate valid flag: ``valid`` reports transmission integrity only.
       It is False when the checksum did not match; the record is still
       fully populated so callers can decide what to do with it.

    4. system: every record carries the ``TalkerSystem`` classified from the
       sentence header.

Times are seconds since midnight UTC, coordinates are decimal degrees
(positive North/East), and proprietary readings are in SI units.
"""

from dataclasses import dataclass
from typing import Union

from nmeaparser.talkers import TalkerSystem


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        system: Talker system that produced the fix.
        time: UTC time of the fix in seconds since midnight.
        latitude: Latitude in decimal degrees, positive=North.
        longitude: Longitude in decimal degrees, positive=East.
        fix_quality: Human readable fix quality, one of "INVALID",
            "GPS (SPS)", "DGPS", "PPS", "REAL TIME KINEMATIC", "FLOAT RTK",
            "DEAD RECKONING", "MANUAL INPUT", "SIMULATION", or "UNKNOWN"
            when the indicator is absent or outside 0-8.
        num_sats: Number of satellites used in the fix.
        hdop: Horizontal dilution of precision.
        altitude: Altitude above mean sea level in meters.
        geoidal_separation: Height of the geoid above the WGS84 ellipsoid
            in meters.
        age_of_differential: Seconds since the last differential update.
        diff_reference_id: Differential reference station ID.
        valid: False when the sentence checksum did not match.

    Example:
        >>> gga = decode("$GPGGA,134740.000,5540.3248,N,01231.2992,E,1,09,0.9,20.2,M,41.5,M,,0000*61")
        >>> gga.fix_quality
        'GPS (SPS)'
        >>> gga.latitude
        55.67208
    """

    system: TalkerSystem
    time: float
    latitude: float
    longitude: float
    fix_quality: str
    num_sats: int
    hdop: float
    altitude: float
    geoidal_separation: float
    age_of_differential: float
    diff_reference_id: int
    valid: bool


@dataclass(frozen=True)
class GSAData:
    """Parsed GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        system: Talker system.
        mode: Selection mode, 'M' = manual or 'A' = automatic.
        current_mode: Fix type, 1 = no fix, 2 = 2D, 3 = 3D.
        sat_ids: PRNs of the satellites used in the solution, in order.
        pdop: Position dilution of precision.
        hdop: Horizontal dilution of precision.
        vdop: Vertical dilution of precision.
        valid: False when the sentence checksum did not match.
    """

    system: TalkerSystem
    mode: str
    current_mode: int
    sat_ids: tuple[int, ...]
    pdop: float
    hdop: float
    vdop: float
    valid: bool


@dataclass(frozen=True)
class ZDAData:
    """Parsed ZDA (Time and Date) sentence."""

    system: TalkerSystem
    time: float
    day: int
    month: int
    year: int
    zone_hrs: int
    zone_mins: int
    valid: bool


@dataclass(frozen=True)
class GBSData:
    """Parsed GBS (GNSS Satellite Fault Detection) sentence.

    Attributes:
        lat_error: Expected latitude error in meters.
        long_error: Expected longitude error in meters.
        alt_error: Expected altitude error in meters.
        failed_prn: PRN of the most likely failed satellite.
        prob_of_missed: Probability of missed detection.
        excluded_meas_err: Estimated bias of the failed satellite in meters.
        standard_deviation: Standard deviation of the bias estimate.
    """

    system: TalkerSystem
    time: float
    lat_error: float
    long_error: float
    alt_error: float
    failed_prn: int
    prob_of_missed: float
    excluded_meas_err: float
    standard_deviation: float
    valid: bool


@dataclass(frozen=True)
class GSTData:
    """Parsed GST (GNSS Pseudorange Error Statistics) sentence.

    Error fields are standard deviations in meters; ``orientation_error`` is
    the orientation of the error ellipse semi-major axis in degrees from
    true north.
    """

    system: TalkerSystem
    time: float
    rms: float
    semi_major_error: float
    semi_minor_error: float
    orientation_error: float
    latitude_error: float
    longitude_error: float
    height_error: float
    valid: bool


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Geographic Position - Latitude/Longitude) sentence.

    Attributes:
        status: True when the receiver reports data valid ('A').
        mode: FAA mode indicator, 'N' when absent.
    """

    system: TalkerSystem
    latitude: float
    longitude: float
    time: float
    status: bool
    mode: str
    valid: bool


@dataclass(frozen=True)
class SatelliteInfo:
    """One satellite entry of a GSV sentence.

    Attributes:
        prn: Satellite PRN number.
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees from true north (0-359).
        snr: Signal to noise ratio in dB-Hz, 0 when not tracking.
    """

    prn: int
    elevation: int
    azimuth: int
    snr: int


@dataclass(frozen=True)
class GSVData:
    """Parsed GSV (GNSS Satellites in View) sentence.

    A full sky view is usually spread over several GSV sentences;
    ``msg_total`` and ``msg_num`` locate this one within the group.
    """

    system: TalkerSystem
    msg_total: int
    msg_num: int
    sat_total: int
    satellites: tuple[SatelliteInfo, ...]
    valid: bool


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        status: True when the receiver reports data valid ('A').
        sog: Speed over ground in knots.
        cog: Course over ground in degrees true.
        day: Two-character day of month from the date field.
        month: Two-character month from the date field.
        year: Two-character year from the date field.
        magvar: Magnetic variation in degrees, negative for West.
        mode: FAA mode indicator, 'N' when absent.
        navstatus: Navigational status (NMEA 4.1), 'V' when absent.
    """

    system: TalkerSystem
    time: float
    status: bool
    latitude: float
    longitude: float
    sog: float
    cog: float
    day: str
    month: str
    year: str
    magvar: float
    mode: str
    navstatus: str
    valid: bool


@dataclass(frozen=True)
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        cog_true: Course over ground relative to true north in degrees.
        cog_mag: Course over ground relative to magnetic north in degrees.
        sog_knots: Ground speed in knots.
        sog_kmhr: Ground speed in km/h.
        mode: FAA mode indicator, 'N' when absent.
    """

    system: TalkerSystem
    cog_true: float
    cog_mag: float
    sog_knots: float
    sog_kmhr: float
    mode: str
    valid: bool


@dataclass(frozen=True)
class DTMData:
    """Parsed DTM (Datum Reference) sentence.

    Offsets are signed by their hemisphere indicators (negative for South
    and West).
    """

    system: TalkerSystem
    local_datum_code: str
    local_datum_subcode: str
    lat_offset: float
    long_offset: float
    alt_offset: float
    ref_datum: str
    valid: bool


@dataclass(frozen=True)
class PASHRData:
    """Parsed PASHR (inertial attitude) proprietary sentence.

    Attributes:
        heading: Heading in degrees.
        heading_type: True when the heading is relative to true north.
        roll: Roll in degrees.
        pitch: Pitch in degrees.
        heave: Heave in meters.
        roll_accuracy: Roll standard deviation in degrees.
        pitch_accuracy: Pitch standard deviation in degrees.
        heading_accuracy: Heading standard deviation in degrees.
        aiding_code: GNSS aiding status code.
        ins_code: INS status code, 0 when the receiver omits it.
    """

    system: TalkerSystem
    time: float
    heading: float
    heading_type: bool
    roll: float
    pitch: float
    heave: float
    roll_accuracy: float
    pitch_accuracy: float
    heading_accuracy: float
    aiding_code: int
    ins_code: int
    valid: bool


@dataclass(frozen=True)
class TWPOSData:
    """Position reading: local coordinates and odometry, in meters and m/s."""

    system: TalkerSystem
    time: float
    x: float
    y: float
    z: float
    distance: float
    velocity: float
    valid: bool


@dataclass(frozen=True)
class TWVCTData:
    """Velocity vector reading: speed in m/s and course in degrees."""

    system: TalkerSystem
    time: float
    speed: float
    course: float
    valid: bool


@dataclass(frozen=True)
class TWPLSData:
    """Wheel encoder pulse reading.

    Attributes:
        left_pulses: Pulses counted on the left wheel.
        right_pulses: Pulses counted on the right wheel.
        pulse_distance: Distance travelled per pulse, in meters.
    """

    system: TalkerSystem
    time: float
    left_pulses: int
    right_pulses: int
    pulse_distance: float
    valid: bool


@dataclass(frozen=True)
class TWWHEData:
    """Wheel speed reading, in m/s."""

    system: TalkerSystem
    time: float
    left_speed: float
    right_speed: float
    valid: bool


@dataclass(frozen=True)
class TWHPRData:
    """Heading, pitch and roll reading, in degrees."""

    system: TalkerSystem
    time: float
    heading: float
    pitch: float
    roll: float
    valid: bool


@dataclass(frozen=True)
class TACCData:
    """Accelerometer reading along the receiver frame axes, in m/s²."""

    system: TalkerSystem
    time: float
    x: float
    y: float
    z: float
    valid: bool


@dataclass(frozen=True)
class TGYRData:
    """Gyroscope reading around the receiver frame axes, in degrees/s."""

    system: TalkerSystem
    time: float
    x: float
    y: float
    z: float
    valid: bool


NMEAMessage = Union[
    GGAData,
    GSAData,
    ZDAData,
    GBSData,
    GSTData,
    GLLData,
    GSVData,
    RMCData,
    VTGData,
    DTMData,
    PASHRData,
    TWPOSData,
    TWVCTData,
    TWPLSData,
    TWWHEData,
    TWHPRData,
    TACCData,
    TGYRData,
]
