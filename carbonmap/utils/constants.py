from __future__ import annotations

KEY_COL = "regionid"            # region identifier from the feed
NAME_COL = "shortname"
LAT_COL = "latitude"
LON_COL = "longitude"
INDEX_COL = "intensity_index"   # flattened intensity.index
UPDATED_COL = "dataLastUpdated"

WEIGHT_COL = "weight"           # heat weight derived from INDEX_COL
COLOR_COL = "color"             # circle color derived from INDEX_COL

REGION_COLUMNS = [KEY_COL, NAME_COL, LAT_COL, LON_COL, INDEX_COL, UPDATED_COL]
