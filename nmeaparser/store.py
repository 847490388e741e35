"""LastMessageStore: the most recent decoded message of each sentence type.

A receiver interleaves many sentence types (RMC, GGA, GSA, GSV, ...). The
store keeps one slot per supported type so that a consumer can ask for the
latest fix, the latest satellite view and so on independently.

Usage::

    store = LastMessageStore()
    for line in lines:
        decode_and_record(store, line)
    gga = store.take(GGAData)   # latest GGA, slot is now empty

The store performs no locking; share it across threads only with external
synchronisation.
"""

import logging
from dataclasses import dataclass, fields

from nmeaparser.errors import MissingValueError
from nmeaparser.types import (
    DTMData,
    GBSData,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    NMEAMessage,
    PASHRData,
    RMCData,
    TACCData,
    TGYRData,
    TWHPRData,
    TWPLSData,
    TWPOSData,
    TWVCTData,
    TWWHEData,
    VTGData,
    ZDAData,
)

__all__ = ["LastMessageStore", "take", "update"]

logger = logging.getLogger(__name__)

_SLOTS: dict[type, str] = {
    GGAData: "last_gga",
    GSAData: "last_gsa",
    ZDAData: "last_zda",
    GBSData: "last_gbs",
    GSTData: "last_gst",
    GLLData: "last_gll",
    GSVData: "last_gsv",
    RMCData: "last_rmc",
    VTGData: "last_vtg",
    DTMData: "last_dtm",
    PASHRData: "last_pashr",
    TWPOSData: "last_twpos",
    TWVCTData: "last_twvct",
    TWPLSData: "last_twpls",
    TWWHEData: "last_twwhe",
    TWHPRData: "last_twhpr",
    TACCData: "last_tacc",
    TGYRData: "last_tgyr",
}


def _slot_name(message_type: type) -> str:
    try:
        return _SLOTS[message_type]
    except KeyError as err:
        raise TypeError(f"{message_type!r} is not an NMEA message type") from err


@dataclass
class LastMessageStore:
    """One optional slot per message type, holding the latest record.

    Attributes:
        last_gga ... last_tgyr: Latest record of each type, or None if no
            record of that type has been stored since the slot was last
            taken or cleared.
    """

    last_gga: GGAData | None = None
    last_gsa: GSAData | None = None
    last_zda: ZDAData | None = None
    last_gbs: GBSData | None = None
    last_gst: GSTData | None = None
    last_gll: GLLData | None = None
    last_gsv: GSVData | None = None
    last_rmc: RMCData | None = None
    last_vtg: VTGData | None = None
    last_dtm: DTMData | None = None
    last_pashr: PASHRData | None = None
    last_twpos: TWPOSData | None = None
    last_twvct: TWVCTData | None = None
    last_twpls: TWPLSData | None = None
    last_twwhe: TWWHEData | None = None
    last_twhpr: TWHPRData | None = None
    last_tacc: TACCData | None = None
    last_tgyr: TGYRData | None = None

    def update(self, message: NMEAMessage) -> "LastMessageStore":
        """Replace the slot matching ``message``'s type and return the store.

        Raises:
            TypeError: If ``message`` is not a decoded NMEA record.
        """
        slot = _slot_name(type(message))
        setattr(self, slot, message)
        logger.debug("Stored %s in %s", type(message).__name__, slot)
        return self

    def take(self, message_type: type) -> NMEAMessage:
        """Return the latest record of ``message_type`` and empty its slot.

        Raises:
            MissingValueError: If the slot is empty.
            TypeError: If ``message_type`` is not an NMEA record class.
        """
        slot = _slot_name(message_type)
        message = getattr(self, slot)
        if message is None:
            raise MissingValueError(f"No {message_type.__name__} message stored")
        setattr(self, slot, None)
        return message

    def peek(self, message_type: type) -> NMEAMessage | None:
        """Return the latest record of ``message_type`` without removing it."""
        return getattr(self, _slot_name(message_type))

    def clear(self) -> None:
        """Empty every slot."""
        for slot in fields(self):
            setattr(self, slot.name, None)


def update(store: LastMessageStore, message: NMEAMessage) -> LastMessageStore:
    """Functional form of ``LastMessageStore.update``."""
    return store.update(message)


def take(store: LastMessageStore, message_type: type) -> NMEAMessage:
    """Functional form of ``LastMessageStore.take``."""
    return store.take(message_type)
