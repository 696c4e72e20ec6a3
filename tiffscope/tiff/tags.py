"""Tag-id and type-code registries.

Unregistered codes are not errors: lookups fall back to the raw integer.
"""

from typing import Dict, Mapping, Optional, Union

# TIFF field types: {type_code: name}
TYPE_NAMES: Dict[int, str] = {
    1: 'BYTE',
    2: 'ASCII',
    3: 'SHORT',
    4: 'LONG',
    5: 'RATIONAL',
    6: 'SBYTE',
    7: 'UNDEFINED',
    8: 'SSHORT',
    9: 'SLONG',
    10: 'SRATIONAL',
    11: 'FLOAT',
    12: 'DOUBLE',
}

# Baseline, extension, Exif, GeoTIFF, DNG and common private tags
TAG_NAMES: Dict[int, str] = {
    # Baseline and extended TIFF 6.0
    254: 'NewSubfileType', 255: 'SubfileType', 256: 'ImageWidth',
    257: 'ImageLength', 258: 'BitsPerSample', 259: 'Compression',
    262: 'PhotometricInterpretation', 263: 'Threshholding',
    264: 'CellWidth', 265: 'CellLength', 266: 'FillOrder',
    269: 'DocumentName', 270: 'ImageDescription', 271: 'Make',
    272: 'Model', 273: 'StripOffsets', 274: 'Orientation',
    277: 'SamplesPerPixel', 278: 'RowsPerStrip', 279: 'StripByteCounts',
    280: 'MinSampleValue', 281: 'MaxSampleValue', 282: 'XResolution',
    283: 'YResolution', 284: 'PlanarConfiguration', 285: 'PageName',
    286: 'XPosition', 287: 'YPosition', 288: 'FreeOffsets',
    289: 'FreeByteCounts', 290: 'GrayResponseUnit', 291: 'GrayResponseCurve',
    292: 'T4Options', 293: 'T6Options', 296: 'ResolutionUnit',
    297: 'PageNumber', 300: 'ColorResponseUnit', 301: 'TransferFunction',
    305: 'Software', 306: 'DateTime', 315: 'Artist', 316: 'HostComputer',
    317: 'Predictor', 318: 'WhitePoint', 319: 'PrimaryChromaticities',
    320: 'ColorMap', 321: 'HalftoneHints', 322: 'TileWidth',
    323: 'TileLength', 324: 'TileOffsets', 325: 'TileByteCounts',
    326: 'BadFaxLines', 327: 'CleanFaxData', 328: 'ConsecutiveBadFaxLines',
    330: 'SubIFDs', 332: 'InkSet', 333: 'InkNames', 334: 'NumberOfInks',
    336: 'DotRange', 337: 'TargetPrinter', 338: 'ExtraSamples',
    339: 'SampleFormat', 340: 'SMinSampleValue', 341: 'SMaxSampleValue',
    342: 'TransferRange', 343: 'ClipPath', 344: 'XClipPathUnits',
    345: 'YClipPathUnits', 346: 'Indexed', 347: 'JPEGTables',
    351: 'OPIProxy', 400: 'GlobalParametersIFD', 401: 'ProfileType',
    402: 'FaxProfile', 403: 'CodingMethods', 404: 'VersionYear',
    405: 'ModeNumber', 433: 'Decode', 434: 'DefaultImageColor',
    435: 'T82Options', 512: 'JPEGProc', 513: 'JPEGInterchangeFormat',
    514: 'JPEGInterchangeFormatLength', 515: 'JPEGRestartInterval',
    517: 'JPEGLosslessPredictors', 518: 'JPEGPointTransforms',
    519: 'JPEGQTables', 520: 'JPEGDCTables', 521: 'JPEGACTables',
    529: 'YCbCrCoefficients', 530: 'YCbCrSubSampling',
    531: 'YCbCrPositioning', 532: 'ReferenceBlackWhite',
    559: 'StripRowCounts', 700: 'XMP',
    # Private and registered extension tags
    18246: 'Rating', 18249: 'RatingPercent',
    32781: 'ImageID', 32932: 'WangAnnotation', 32953: 'ImageReferencePoints',
    32954: 'RegionXformTackPoint', 32955: 'WarpQuadrilateral',
    32956: 'AffineTransformMat', 32995: 'Matteing', 32996: 'DataType',
    32997: 'ImageDepth', 32998: 'TileDepth',
    33300: 'ImageFullWidth', 33301: 'ImageFullLength',
    33302: 'TextureFormat', 33303: 'WrapModes', 33304: 'FovCot',
    33305: 'MatrixWorldToScreen', 33306: 'MatrixWorldToCamera',
    33405: 'WriterSerialNumber', 33421: 'CFARepeatPatternDim',
    33422: 'CFAPattern', 33423: 'BatteryLevel', 33432: 'Copyright',
    33434: 'ExposureTime', 33437: 'FNumber',
    33445: 'MDFileTag', 33446: 'MDScalePixel', 33447: 'MDColorTable',
    33448: 'MDLabName', 33449: 'MDSampleInfo', 33450: 'MDPrepDate',
    33451: 'MDPrepTime', 33452: 'MDFileUnits',
    33550: 'ModelPixelScale', 33723: 'IPTC',
    33918: 'INGRPacketData', 33919: 'INGRFlagRegisters',
    33920: 'IrasBTransformationMatrix', 33922: 'ModelTiepoint',
    34016: 'IT8Site', 34017: 'IT8ColorSequence', 34018: 'IT8Header',
    34019: 'IT8RasterPadding', 34020: 'IT8BitsPerRunLength',
    34021: 'IT8BitsPerExtendedRunLength', 34022: 'IT8ColorTable',
    34023: 'IT8ImageColorIndicator', 34024: 'IT8BkgColorIndicator',
    34025: 'IT8ImageColorValue', 34026: 'IT8BkgColorValue',
    34027: 'IT8PixelIntensityRange', 34028: 'IT8TransparencyIndicator',
    34029: 'IT8ColorCharacterization', 34030: 'IT8HCUsage',
    34031: 'IT8TrapIndicator', 34032: 'IT8CMYKEquivalent',
    34118: 'SEMMetadata', 34232: 'FrameCount',
    34264: 'ModelTransformation', 34377: 'Photoshop',
    34665: 'ExifIFD', 34675: 'ICCProfile', 34732: 'ImageLayer',
    34735: 'GeoKeyDirectory', 34736: 'GeoDoubleParams',
    34737: 'GeoAsciiParams', 34750: 'JBIGOptions',
    34850: 'ExposureProgram', 34852: 'SpectralSensitivity',
    34853: 'GPSIFD', 34855: 'ISOSpeedRatings', 34856: 'OECF',
    34857: 'Interlace', 34858: 'TimeZoneOffset', 34859: 'SelfTimerMode',
    34864: 'SensitivityType', 34865: 'StandardOutputSensitivity',
    34866: 'RecommendedExposureIndex', 34867: 'ISOSpeed',
    34868: 'ISOSpeedLatitudeyyy', 34869: 'ISOSpeedLatitudezzz',
    34908: 'FaxRecvParams', 34909: 'FaxSubAddress', 34910: 'FaxRecvTime',
    34911: 'FaxDCS', 34929: 'FedexEDR',
    # Exif private IFD
    36864: 'ExifVersion', 36867: 'DateTimeOriginal',
    36868: 'DateTimeDigitized', 36880: 'OffsetTime',
    36881: 'OffsetTimeOriginal', 36882: 'OffsetTimeDigitized',
    37121: 'ComponentsConfiguration', 37122: 'CompressedBitsPerPixel',
    37377: 'ShutterSpeedValue', 37378: 'ApertureValue',
    37379: 'BrightnessValue', 37380: 'ExposureBiasValue',
    37381: 'MaxApertureValue', 37382: 'SubjectDistance',
    37383: 'MeteringMode', 37384: 'LightSource', 37385: 'Flash',
    37386: 'FocalLength', 37387: 'FlashEnergy',
    37388: 'SpatialFrequencyResponse', 37389: 'Noise',
    37390: 'FocalPlaneXResolution', 37391: 'FocalPlaneYResolution',
    37392: 'FocalPlaneResolutionUnit', 37393: 'ImageNumber',
    37394: 'SecurityClassification', 37395: 'ImageHistory',
    37396: 'SubjectArea', 37397: 'ExposureIndex', 37398: 'TIFFEPStandardID',
    37399: 'SensingMethod', 37439: 'StoNits', 37500: 'MakerNote',
    37510: 'UserComment', 37520: 'SubSecTime',
    37521: 'SubSecTimeOriginal', 37522: 'SubSecTimeDigitized',
    37724: 'ImageSourceData', 37888: 'Temperature', 37889: 'Humidity',
    37890: 'Pressure', 37891: 'WaterDepth', 37892: 'Acceleration',
    37893: 'CameraElevationAngle',
    40091: 'XPTitle', 40092: 'XPComment', 40093: 'XPAuthor',
    40094: 'XPKeywords', 40095: 'XPSubject',
    40960: 'FlashpixVersion', 40961: 'ColorSpace',
    40962: 'PixelXDimension', 40963: 'PixelYDimension',
    40964: 'RelatedSoundFile', 40965: 'InteroperabilityIFD',
    41483: 'FlashEnergyExif', 41484: 'SpatialFrequencyResponseExif',
    41486: 'FocalPlaneXResolutionExif', 41487: 'FocalPlaneYResolutionExif',
    41488: 'FocalPlaneResolutionUnitExif', 41492: 'SubjectLocation',
    41493: 'ExposureIndexExif', 41495: 'SensingMethodExif',
    41728: 'FileSource', 41729: 'SceneType', 41730: 'CFAPatternExif',
    41985: 'CustomRendered', 41986: 'ExposureMode', 41987: 'WhiteBalance',
    41988: 'DigitalZoomRatio', 41989: 'FocalLengthIn35mmFilm',
    41990: 'SceneCaptureType', 41991: 'GainControl', 41992: 'Contrast',
    41993: 'Saturation', 41994: 'Sharpness',
    41995: 'DeviceSettingDescription', 41996: 'SubjectDistanceRange',
    42016: 'ImageUniqueID', 42032: 'CameraOwnerName',
    42033: 'BodySerialNumber', 42034: 'LensSpecification',
    42035: 'LensMake', 42036: 'LensModel', 42037: 'LensSerialNumber',
    42080: 'CompositeImage', 42081: 'SourceImageNumberOfCompositeImage',
    42082: 'SourceExposureTimesOfCompositeImage', 42240: 'Gamma',
    # GDAL
    42112: 'GDALMetadata', 42113: 'GDALNoData',
    # Oce scanning
    50215: 'OceScanjobDescription', 50216: 'OceApplicationSelector',
    50217: 'OceIdentificationNumber', 50218: 'OceImageLogicCharacteristics',
    50341: 'PrintImageMatching', 50674: 'LercParameters',
    # DNG
    50706: 'DNGVersion', 50707: 'DNGBackwardVersion',
    50708: 'UniqueCameraModel', 50709: 'LocalizedCameraModel',
    50710: 'CFAPlaneColor', 50711: 'CFALayout',
    50712: 'LinearizationTable', 50713: 'BlackLevelRepeatDim',
    50714: 'BlackLevel', 50715: 'BlackLevelDeltaH',
    50716: 'BlackLevelDeltaV', 50717: 'WhiteLevel', 50718: 'DefaultScale',
    50719: 'DefaultCropOrigin', 50720: 'DefaultCropSize',
    50721: 'ColorMatrix1', 50722: 'ColorMatrix2',
    50723: 'CameraCalibration1', 50724: 'CameraCalibration2',
    50725: 'ReductionMatrix1', 50726: 'ReductionMatrix2',
    50727: 'AnalogBalance', 50728: 'AsShotNeutral', 50729: 'AsShotWhiteXY',
    50730: 'BaselineExposure', 50731: 'BaselineNoise',
    50732: 'BaselineSharpness', 50733: 'BayerGreenSplit',
    50734: 'LinearResponseLimit', 50735: 'CameraSerialNumber',
    50736: 'LensInfo', 50737: 'ChromaBlurRadius', 50738: 'AntiAliasStrength',
    50739: 'ShadowScale', 50740: 'DNGPrivateData', 50741: 'MakerNoteSafety',
    50778: 'CalibrationIlluminant1', 50779: 'CalibrationIlluminant2',
    50780: 'BestQualityScale', 50781: 'RawDataUniqueID',
    50784: 'AliasLayerMetadata', 50827: 'OriginalRawFileName',
    50828: 'OriginalRawFileData', 50829: 'ActiveArea', 50830: 'MaskedAreas',
    50831: 'AsShotICCProfile', 50832: 'AsShotPreProfileMatrix',
    50833: 'CurrentICCProfile', 50834: 'CurrentPreProfileMatrix',
    50838: 'ImageJMetadataByteCounts', 50839: 'ImageJMetadata',
    50844: 'RPCCoefficient', 50879: 'ColorimetricReference',
    50908: 'TIFFRSID', 50909: 'GeoMetadata',
    50931: 'CameraCalibrationSignature', 50932: 'ProfileCalibrationSignature',
    50933: 'ExtraCameraProfiles', 50934: 'AsShotProfileName',
    50935: 'NoiseReductionApplied', 50936: 'ProfileName',
    50937: 'ProfileHueSatMapDims', 50938: 'ProfileHueSatMapData1',
    50939: 'ProfileHueSatMapData2', 50940: 'ProfileToneCurve',
    50941: 'ProfileEmbedPolicy', 50942: 'ProfileCopyright',
    50964: 'ForwardMatrix1', 50965: 'ForwardMatrix2',
    50966: 'PreviewApplicationName', 50967: 'PreviewApplicationVersion',
    50968: 'PreviewSettingsName', 50969: 'PreviewSettingsDigest',
    50970: 'PreviewColorSpace', 50971: 'PreviewDateTime',
    50972: 'RawImageDigest', 50973: 'OriginalRawFileDigest',
    50974: 'SubTileBlockSize', 50975: 'RowInterleaveFactor',
    50981: 'ProfileLookTableDims', 50982: 'ProfileLookTableData',
    51008: 'OpcodeList1', 51009: 'OpcodeList2', 51022: 'OpcodeList3',
    51041: 'NoiseProfile', 51089: 'OriginalDefaultFinalSize',
    51090: 'OriginalBestQualityFinalSize', 51091: 'OriginalDefaultCropSize',
    51107: 'ProfileHueSatMapEncoding', 51108: 'ProfileLookTableEncoding',
    51109: 'BaselineExposureOffset', 51110: 'DefaultBlackRender',
    51111: 'NewRawImageDigest', 51112: 'RawToPreviewGain',
    51125: 'DefaultUserCrop', 51177: 'DepthFormat', 51178: 'DepthNear',
    51179: 'DepthFar', 51180: 'DepthUnits', 51181: 'DepthMeasureType',
    51182: 'EnhanceParams',
    # Aperio SVS
    55000: 'AperioUnknown55000', 55001: 'AperioMagnification',
    55002: 'AperioMPP', 55003: 'AperioScanScopeID', 55004: 'AperioDate',
    # Hamamatsu NDPI
    65324: 'NDPIOffsetHighBytes', 65325: 'NDPIByteCountHighBytes',
    65420: 'NDPIFormatFlag', 65421: 'NDPISourceLens',
    65422: 'NDPIXOffset', 65423: 'NDPIYOffset', 65424: 'NDPIFocalPlane',
    65425: 'NDPITissueIndex', 65426: 'NDPIMcuStarts',
    65427: 'NDPIReference', 65428: 'NDPIAuthCode',
    65432: 'NDPIMcuStartsHighBytes', 65434: 'NDPIChannel',
    65435: 'NDPIExposureRatio', 65436: 'NDPIRedMultiplier',
    65437: 'NDPIGreenMultiplier', 65438: 'NDPIBlueMultiplier',
    65439: 'NDPIFocusPoints', 65440: 'NDPIFocusPointRegions',
    65441: 'NDPICaptureMode', 65442: 'NDPISerialNumber',
    65444: 'NDPIJpegQuality', 65445: 'NDPIRefocusInterval',
    65446: 'NDPIFocusOffset', 65447: 'NDPIBlankLines',
    65448: 'NDPIFirmwareVersion', 65449: 'NDPIPropertyMap',
    65450: 'NDPILabelObscured', 65451: 'NDPIEmissionWavelength',
    65453: 'NDPILampAge', 65454: 'NDPIExposureTime',
    65455: 'NDPIFocusTime', 65456: 'NDPIScanTime', 65457: 'NDPIWriteTime',
    65458: 'NDPIFullyAutoFocus', 65468: 'NDPIBarcode',
    65500: 'NDPIDefaultGamma',
}

# GPS IFD (tags 0-31)
GPS_TAG_NAMES: Dict[int, str] = {
    0: 'GPSVersionID', 1: 'GPSLatitudeRef', 2: 'GPSLatitude',
    3: 'GPSLongitudeRef', 4: 'GPSLongitude', 5: 'GPSAltitudeRef',
    6: 'GPSAltitude', 7: 'GPSTimeStamp', 8: 'GPSSatellites',
    9: 'GPSStatus', 10: 'GPSMeasureMode', 11: 'GPSDOP',
    12: 'GPSSpeedRef', 13: 'GPSSpeed', 14: 'GPSTrackRef',
    15: 'GPSTrack', 16: 'GPSImgDirectionRef', 17: 'GPSImgDirection',
    18: 'GPSMapDatum', 19: 'GPSDestLatitudeRef', 20: 'GPSDestLatitude',
    21: 'GPSDestLongitudeRef', 22: 'GPSDestLongitude', 23: 'GPSDestBearingRef',
    24: 'GPSDestBearing', 25: 'GPSDestDistanceRef', 26: 'GPSDestDistance',
    27: 'GPSProcessingMethod', 28: 'GPSAreaInformation', 29: 'GPSDateStamp',
    30: 'GPSDifferential', 31: 'GPSHPositioningError',
}

INTEROPERABILITY_TAG_NAMES: Dict[int, str] = {
    1: 'InteroperabilityIndex',
    2: 'InteroperabilityVersion',
    4096: 'RelatedImageFileFormat',
    4097: 'RelatedImageWidth',
    4098: 'RelatedImageLength',
}

_TAG_CODES: Dict[str, int] = {name: code for code, name in TAG_NAMES.items()}
for _names in (GPS_TAG_NAMES, INTEROPERABILITY_TAG_NAMES):
    for _code, _name in _names.items():
        _TAG_CODES.setdefault(_name, _code)


def tag_symbol(code: int,
               namespace: Mapping[int, str] = TAG_NAMES) -> Union[str, int]:
    """Symbolic name for a tag id, or the id itself when unregistered."""
    return namespace.get(code, code)


def type_symbol(code: int) -> Union[str, int]:
    """Symbolic name for a type code, or the code itself when unregistered."""
    return TYPE_NAMES.get(code, code)


def tag_code(name: str) -> Optional[int]:
    """Reverse lookup: numeric id for a registered tag name."""
    return _TAG_CODES.get(name)
