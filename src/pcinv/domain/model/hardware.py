"""Hardware taxonomies used to describe parts.

These are descriptive only. Nothing in the domain checks that a CPU fits a
socket or that a DIMM matches a board's memory type.
"""

from __future__ import annotations

from enum import Enum


class _Taxonomy(Enum):

    @classmethod
    def parse(cls, text: str):
        """Look up a member by value or name, ignoring case.

        Anything unknown maps to ``OTHER``.
        """
        wanted = text.strip().lower()
        for member in cls:
            if wanted in (member.value.lower(), member.name.lower()):
                return member
        return cls["OTHER"]


class CPUSocket(_Taxonomy):
    # Intel desktop
    LGA1151 = "LGA1151"
    LGA1155 = "LGA1155"
    LGA1200 = "LGA1200"
    LGA1700 = "LGA1700"
    LGA1366 = "LGA1366"
    LGA2011 = "LGA2011"
    LGA2066 = "LGA2066"

    # Intel server / workstation
    LGA4189 = "LGA4189"
    LGA4677 = "LGA4677"

    # AMD desktop
    AM3 = "AM3"
    AM3_PLUS = "AM3+"
    AM4 = "AM4"
    AM5 = "AM5"

    # AMD HEDT / workstation
    TR4 = "TR4"
    STRX4 = "sTRX4"
    SWRX8 = "sWRX8"

    # AMD server
    SP3 = "SP3"

    BGA = "BGA"  # soldered
    ARM = "ARM"
    OTHER = "Other"


class RAMType(_Taxonomy):
    SDR = "SDR"
    DDR = "DDR"
    DDR2 = "DDR2"
    DDR3 = "DDR3"
    DDR4 = "DDR4"
    DDR5 = "DDR5"
    LPDDR3 = "LPDDR3"
    LPDDR4 = "LPDDR4"
    LPDDR5 = "LPDDR5"
    OTHER = "Other"
