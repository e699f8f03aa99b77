"""Core constants used across volcano camera modules.

This module centralizes feed URLs and fixed feature presentation values.
Keeping values here avoids magic literals in mapping logic.
"""

from __future__ import annotations

ETL_NAME = "etl-geonet-volcanocams"
DEFAULT_SOURCE_URL = "https://images.geonet.org.nz/volcano/cameras/all.json"
DEFAULT_CAMERA_PROXY_URL = "https://utils.test.tak.nz/camera-proxy/"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
CAMERA_PAGE_BASE_URL = "https://www.geonet.org.nz/volcano/cameras/"
FEATURE_ID_PREFIX = "volcano-camera-"
NZST_SUFFIX = " NZST"
NZDT_SUFFIX = " NZDT"
NZST_UTC_OFFSET_HOURS = 12
NZDT_UTC_OFFSET_HOURS = 13
SENSOR_FIELD_OF_VIEW_DEGREES = 45
SENSOR_VERTICAL_FIELD_OF_VIEW_DEGREES = 45
SENSOR_ROLL_DEGREES = 0
SENSOR_RANGE = 15000
SENSOR_ELEVATION_DEGREES = 0
COORDINATE_DECIMAL_PLACES = 6
COT_TYPE = "a-f-G-E-S"
COT_HOW = "m-g"
CAMERA_ICON = "ad78aafb-83a6-4c07-b2b9-a897a8b6a38f:Shapes/camera.png"
MARKER_COLOR = "rgb(25, 152, 123)"
LINK_RELATION = "r-u"
LINK_MIME = "text/html"
LINK_REMARKS = "View Camera"
