"""GeoTIFF GeoKeyDirectory decoding.

The GeoKeyDirectory tag holds an array of SHORTs: a 4-entry header
(version, key revision, minor revision, number of keys) followed by one
4-SHORT group per key (key id, tag location, count, value or offset). A
tag location of 0 means the value is the SHORT itself; otherwise the
values live in another tag (usually GeoDoubleParams or GeoAsciiParams) and
are left unresolved here.
"""

import logging
from typing import Any, Dict

from tiffscope.models import GeoKeyDirectory, GeoKeyEntry, GeoKeyReference
from tiffscope.tiff.tags import tag_symbol

logger = logging.getLogger(__name__)

GEO_KEY_NAMES: Dict[int, str] = {
    # GeoTIFF configuration keys
    1024: 'GTModelTypeGeoKey',
    1025: 'GTRasterTypeGeoKey',
    1026: 'GTCitationGeoKey',
    # Geographic CS parameter keys
    2048: 'GeographicTypeGeoKey',
    2049: 'GeogCitationGeoKey',
    2050: 'GeogGeodeticDatumGeoKey',
    2051: 'GeogPrimeMeridianGeoKey',
    2052: 'GeogLinearUnitsGeoKey',
    2053: 'GeogLinearUnitSizeGeoKey',
    2054: 'GeogAngularUnitsGeoKey',
    2055: 'GeogAngularUnitSizeGeoKey',
    2056: 'GeogEllipsoidGeoKey',
    2057: 'GeogSemiMajorAxisGeoKey',
    2058: 'GeogSemiMinorAxisGeoKey',
    2059: 'GeogInvFlatteningGeoKey',
    2060: 'GeogAzimuthUnitsGeoKey',
    2061: 'GeogPrimeMeridianLongGeoKey',
    2062: 'GeogTOWGS84GeoKey',
    # Projected CS parameter keys
    3072: 'ProjectedCSTypeGeoKey',
    3073: 'PCSCitationGeoKey',
    3074: 'ProjectionGeoKey',
    3075: 'ProjCoordTransGeoKey',
    3076: 'ProjLinearUnitsGeoKey',
    3077: 'ProjLinearUnitSizeGeoKey',
    3078: 'ProjStdParallel1GeoKey',
    3079: 'ProjStdParallel2GeoKey',
    3080: 'ProjNatOriginLongGeoKey',
    3081: 'ProjNatOriginLatGeoKey',
    3082: 'ProjFalseEastingGeoKey',
    3083: 'ProjFalseNorthingGeoKey',
    3084: 'ProjFalseOriginLongGeoKey',
    3085: 'ProjFalseOriginLatGeoKey',
    3086: 'ProjFalseOriginEastingGeoKey',
    3087: 'ProjFalseOriginNorthingGeoKey',
    3088: 'ProjCenterLongGeoKey',
    3089: 'ProjCenterLatGeoKey',
    3090: 'ProjCenterEastingGeoKey',
    3091: 'ProjCenterNorthingGeoKey',
    3092: 'ProjScaleAtNatOriginGeoKey',
    3093: 'ProjScaleAtCenterGeoKey',
    3094: 'ProjAzimuthAngleGeoKey',
    3095: 'ProjStraightVertPoleLongGeoKey',
    3096: 'ProjRectifiedGridAngleGeoKey',
    # Vertical CS parameter keys
    4096: 'VerticalCSTypeGeoKey',
    4097: 'VerticalCitationGeoKey',
    4098: 'VerticalDatumGeoKey',
    4099: 'VerticalUnitsGeoKey',
    5120: 'CoordinateEpochGeoKey',
}

HEADER_LENGTH = 4
KEY_LENGTH = 4


def decode_geo_key_directory(value: Any) -> Any:
    """Interpret a decoded GeoKeyDirectory SHORT array.

    Returns a GeoKeyDirectory, or ``value`` unchanged when its length does
    not match the declared number of keys.
    """
    if (not isinstance(value, tuple) or len(value) < HEADER_LENGTH
            or not all(isinstance(v, int) for v in value)):
        logger.warning('GeoKeyDirectory is not an integer array with a header; '
                       'leaving it uninterpreted')
        return value

    version, revision, minor_revision, key_count = value[:HEADER_LENGTH]
    expected = HEADER_LENGTH + KEY_LENGTH * key_count
    if len(value) != expected:
        logger.warning('GeoKeyDirectory declares %d keys (%d values) but holds '
                       '%d values; leaving it uninterpreted',
                       key_count, expected, len(value))
        return value

    entries = []
    for i in range(HEADER_LENGTH, expected, KEY_LENGTH):
        key_id, location, count, value_or_offset = value[i:i + KEY_LENGTH]
        key = GEO_KEY_NAMES.get(key_id, key_id)
        if location == 0:
            entries.append(GeoKeyEntry(key, value_or_offset))
        else:
            ref = GeoKeyReference(tag_symbol(location), count, value_or_offset)
            entries.append(GeoKeyEntry(key, ref))

    return GeoKeyDirectory((version, revision, minor_revision), tuple(entries), value)
