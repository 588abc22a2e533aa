"""
Firm/tenant parser.

Columns: SIRA_NO, ETAP, BLOK, NO, FIRMA, KIRACI/MALIK, IS_KOLU.
"""

import logging
from collections import Counter
from typing import List

from msm_floorplan.models import FirmInfo
from msm_floorplan.parsing.csv_line import iter_data_rows
from msm_floorplan.parsing.values import parse_int

logger = logging.getLogger(__name__)

FIRM_MIN_FIELDS = 7


def parse_firms_csv(content: str) -> List[FirmInfo]:
    """
    Parse the firm information export.

    A row is kept only when it has at least seven fields and its first
    field starts with an integer; blank and footer rows fall out this way.
    Block letters are upper-cased.
    """
    firms = []

    for fields in iter_data_rows(content):
        if len(fields) < FIRM_MIN_FIELDS or not fields[0]:
            continue
        sira_no = parse_int(fields[0])
        if sira_no is None:
            continue

        firms.append(
            FirmInfo(
                sira_no=sira_no,
                etap=fields[1],
                block=fields[2].upper(),
                unit_no=fields[3],
                firma=fields[4],
                kiraci=fields[5],
                is_kolu=fields[6],
            )
        )

    logger.debug(f"Parsed {len(firms)} firms, by etap: {dict(Counter(f.etap for f in firms))}")
    return firms
