"""Per-sentence constructors turning split fields into typed records."""

from nmeaparser.sentences.accuracy import build_gbs, build_gst
from nmeaparser.sentences.dtm import build_dtm
from nmeaparser.sentences.gga import build_gga, describe_fix_quality
from nmeaparser.sentences.gll import build_gll
from nmeaparser.sentences.gsa import build_gsa
from nmeaparser.sentences.gsv import build_gsv
from nmeaparser.sentences.proprietary import (
    build_pashr,
    build_tacc,
    build_tgyr,
    build_twhpr,
    build_twpls,
    build_twpos,
    build_twvct,
    build_twwhe,
)
from nmeaparser.sentences.rmc import build_rmc
from nmeaparser.sentences.vtg import build_vtg
from nmeaparser.sentences.zda import build_zda

__all__ = [
    "build_dtm",
    "build_gbs",
    "build_gga",
    "build_gll",
    "build_gsa",
    "build_gst",
    "build_gsv",
    "build_pashr",
    "build_rmc",
    "build_tacc",
    "build_tgyr",
    "build_twhpr",
    "build_twpls",
    "build_twpos",
    "build_twvct",
    "build_twwhe",
    "build_vtg",
    "build_zda",
    "describe_fix_quality",
]
