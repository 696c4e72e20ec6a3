"""Per-tag value interpretation.

Interpreters are pure functions of the decoded value, selected by the
tag's symbolic name. Tags without an interpreter, or whose id did not
resolve to a name, keep their decoded value.
"""

from functools import partial
from typing import Any, Callable, Dict, Mapping, Optional, Union

from tiffscope.tiff.geokeys import decode_geo_key_directory

# Enumerated tag values: {tag_name: {value: symbol}}
# A None symbol marks a value that is present but carries no meaning
# ("unknown", "not defined"); it is reported as None, not dropped.
ENUMERATED_VALUES: Dict[str, Dict[int, Optional[str]]] = {
    'SubfileType': {
        1: 'FullResolution',
        2: 'ReducedResolution',
        3: 'SinglePage',
    },
    'Compression': {
        1: 'Uncompressed',
        2: 'CCITTRLE',
        3: 'CCITTFax3',
        4: 'CCITTFax4',
        5: 'LZW',
        6: 'OJPEG',
        7: 'JPEG',
        8: 'AdobeDeflate',
        9: 'JBIGBW',
        10: 'JBIGColor',
        32766: 'NeXT',
        32771: 'CCITTRLEW',
        32773: 'PackBits',
        32809: 'ThunderScan',
        32895: 'IT8CTPAD',
        32896: 'IT8LW',
        32897: 'IT8MP',
        32898: 'IT8BL',
        32908: 'PixarFilm',
        32909: 'PixarLog',
        32946: 'Deflate',
        32947: 'DCS',
        33003: 'AperioJP2000YCbC',
        33005: 'AperioJP2000RGB',
        34661: 'JBIG',
        34676: 'SGILog',
        34677: 'SGILog24',
        34712: 'JPEG2000',
        34887: 'LERC',
        34925: 'LZMA',
        50000: 'ZSTD',
        50001: 'WebP',
        50002: 'JPEGXLLegacy',
        52546: 'JPEGXL',
    },
    'PhotometricInterpretation': {
        0: 'WhiteIsZero',
        1: 'BlackIsZero',
        2: 'RGB',
        3: 'Palette',
        4: 'TransparencyMask',
        5: 'Separated',
        6: 'YCbCr',
        8: 'CIELab',
        9: 'ICCLab',
        10: 'ITULab',
        32803: 'ColorFilterArray',
        32844: 'LogL',
        32845: 'LogLuv',
        34892: 'LinearRaw',
        51177: 'Depth',
    },
    'Threshholding': {
        1: 'NoDithering',
        2: 'OrderedDither',
        3: 'RandomizedDither',
    },
    'FillOrder': {
        1: 'MSB2LSB',
        2: 'LSB2MSB',
    },
    'Orientation': {
        1: 'TopLeft',
        2: 'TopRight',
        3: 'BottomRight',
        4: 'BottomLeft',
        5: 'LeftTop',
        6: 'RightTop',
        7: 'RightBottom',
        8: 'LeftBottom',
    },
    'PlanarConfiguration': {
        1: 'Chunky',
        2: 'Planar',
    },
    'ResolutionUnit': {
        1: None,
        2: 'Inch',
        3: 'Centimeter',
    },
    'Predictor': {
        1: None,
        2: 'HorizontalDifferencing',
        3: 'FloatingPoint',
    },
    'CleanFaxData': {
        0: 'Clean',
        1: 'Regenerated',
        2: 'Unclean',
    },
    'InkSet': {
        1: 'CMYK',
        2: 'NotCMYK',
    },
    'ExtraSamples': {
        0: None,
        1: 'AssociatedAlpha',
        2: 'UnassociatedAlpha',
    },
    'SampleFormat': {
        1: 'UnsignedInteger',
        2: 'SignedInteger',
        3: 'IEEEFloat',
        4: None,
        5: 'ComplexInteger',
        6: 'ComplexIEEEFloat',
    },
    'YCbCrPositioning': {
        1: 'Centered',
        2: 'Cosited',
    },
    'ExposureProgram': {
        0: None,
        1: 'Manual',
        2: 'Normal',
        3: 'AperturePriority',
        4: 'ShutterPriority',
        5: 'Creative',
        6: 'Action',
        7: 'Portrait',
        8: 'Landscape',
    },
    'SensitivityType': {
        0: None,
        1: 'StandardOutputSensitivity',
        2: 'RecommendedExposureIndex',
        3: 'ISOSpeed',
        4: 'SOSAndREI',
        5: 'SOSAndISOSpeed',
        6: 'REIAndISOSpeed',
        7: 'SOSAndREIAndISOSpeed',
    },
    'MeteringMode': {
        0: None,
        1: 'Average',
        2: 'CenterWeightedAverage',
        3: 'Spot',
        4: 'MultiSpot',
        5: 'Pattern',
        6: 'Partial',
        255: 'Other',
    },
    'LightSource': {
        0: None,
        1: 'Daylight',
        2: 'Fluorescent',
        3: 'Tungsten',
        4: 'Flash',
        9: 'FineWeather',
        10: 'CloudyWeather',
        11: 'Shade',
        12: 'DaylightFluorescent',
        13: 'DayWhiteFluorescent',
        14: 'CoolWhiteFluorescent',
        15: 'WhiteFluorescent',
        16: 'WarmWhiteFluorescent',
        17: 'StandardLightA',
        18: 'StandardLightB',
        19: 'StandardLightC',
        20: 'D55',
        21: 'D65',
        22: 'D75',
        23: 'D50',
        24: 'ISOStudioTungsten',
        255: 'Other',
    },
    'FocalPlaneResolutionUnit': {
        1: None,
        2: 'Inch',
        3: 'Centimeter',
    },
    'ColorSpace': {
        1: 'sRGB',
        2: 'AdobeRGB',
        0xFFFF: 'Uncalibrated',
    },
    'SensingMethod': {
        1: None,
        2: 'OneChipColorArea',
        3: 'TwoChipColorArea',
        4: 'ThreeChipColorArea',
        5: 'ColorSequentialArea',
        7: 'Trilinear',
        8: 'ColorSequentialLinear',
    },
    'CustomRendered': {
        0: 'Normal',
        1: 'Custom',
    },
    'ExposureMode': {
        0: 'Auto',
        1: 'Manual',
        2: 'AutoBracket',
    },
    'WhiteBalance': {
        0: 'Auto',
        1: 'Manual',
    },
    'SceneCaptureType': {
        0: 'Standard',
        1: 'Landscape',
        2: 'Portrait',
        3: 'Night',
    },
    'GainControl': {
        0: None,
        1: 'LowGainUp',
        2: 'HighGainUp',
        3: 'LowGainDown',
        4: 'HighGainDown',
    },
    'Contrast': {
        0: 'Normal',
        1: 'Soft',
        2: 'Hard',
    },
    'Saturation': {
        0: 'Normal',
        1: 'Low',
        2: 'High',
    },
    'Sharpness': {
        0: 'Normal',
        1: 'Soft',
        2: 'Hard',
    },
    'SubjectDistanceRange': {
        0: None,
        1: 'Macro',
        2: 'Close',
        3: 'Distant',
    },
    'GPSAltitudeRef': {
        0: 'AboveSeaLevel',
        1: 'BelowSeaLevel',
    },
    'GPSDifferential': {
        0: 'NoCorrection',
        1: 'Corrected',
    },
}

# Flash bits 3-4
FLASH_MODES = {
    1: 'ForcedOnMode',
    2: 'DisabledMode',
    3: 'AutoMode',
}

# NewSubfileType bits
SUBFILE_FLAGS = {
    0x1: 'ReducedResolution',
    0x2: 'Page',
    0x4: 'TransparencyMask',
}


def decode_enumerated(table: Mapping[int, Optional[str]], value: Any) -> Any:
    """Map an integer (or each integer of a tuple) through ``table``.

    Unmapped values pass through unchanged.
    """
    if isinstance(value, tuple):
        return tuple(decode_enumerated(table, v) for v in value)
    if isinstance(value, int) and value in table:
        return table[value]
    return value


def decode_flash(value: Any) -> Any:
    """Decode the Exif Flash bitfield into a frozenset of flags."""
    if not isinstance(value, int):
        return value
    flags = set()
    if value & 0x01:
        flags.add('Fired')
    # Bits 1-2: 0b10 return not detected, 0b11 return detected
    if value & 0x04:
        if value & 0x02:
            flags.add('StrobeReturnDetected')
        else:
            flags.add('StrobeReturnNotDetected')
    mode = (value >> 3) & 0x03
    if mode:
        flags.add(FLASH_MODES[mode])
    if value & 0x20:
        flags.add('FlashPresent')
    if value & 0x40:
        flags.add('RedEyeReduction')
    return frozenset(flags)


def decode_subfile_flags(value: Any) -> Any:
    """Decode the NewSubfileType bitfield into a frozenset of flags."""
    if not isinstance(value, int):
        return value
    return frozenset(name for bit, name in SUBFILE_FLAGS.items() if value & bit)


def decode_version(value: Any) -> Any:
    """Turn a 4-digit version such as b'0230' into (major, minor)."""
    if isinstance(value, bytes):
        try:
            value_str = value.decode('ascii')
        except UnicodeDecodeError:
            return value
    elif isinstance(value, str):
        value_str = value
    else:
        return value
    if len(value_str) != 4 or not value_str.isdigit():
        return value
    return int(value_str[:2]), int(value_str[2:])


INTERPRETERS: Dict[str, Callable[[Any], Any]] = {
    name: partial(decode_enumerated, table)
    for name, table in ENUMERATED_VALUES.items()
}
INTERPRETERS.update({
    'NewSubfileType': decode_subfile_flags,
    'Flash': decode_flash,
    'ExifVersion': decode_version,
    'FlashpixVersion': decode_version,
    'InteroperabilityVersion': decode_version,
    'GeoKeyDirectory': decode_geo_key_directory,
})


def interpret_value(tag_id: Union[str, int], value: Any) -> Any:
    """Apply the interpreter registered for a symbolic tag id, if any."""
    if not isinstance(tag_id, str):
        return value
    interpreter = INTERPRETERS.get(tag_id)
    if interpreter is None:
        return value
    return interpreter(value)
