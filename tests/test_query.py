"""Tests for tree traversal, extraction and export."""

import json
from fractions import Fraction

import pytest

from tiffscope import decode, extract, find, flatten, iter_tags, to_dict, traverse
from tests.conftest import SubIFD, build_tiff, build_tiff_multi_ifd

LEAF_ORDER = [
    'ImageWidth', 'ImageLength', 'Compression', 'PhotometricInterpretation',
    'Make', 'XResolution', 'ResolutionUnit',
    'ExposureTime', 'ExifVersion', 'Flash',
    'InteroperabilityIndex', 'InteroperabilityVersion',
    'GPSVersionID', 'GPSLatitudeRef', 'GPSLatitude',
]


@pytest.fixture
def tree(sample_tiff):
    return decode(sample_tiff)


class TestTraverse:
    def test_visits_every_leaf_depth_first(self, tree):
        seen = []
        traverse(tree, lambda tag: seen.append(tag.id))
        assert seen == LEAF_ORDER

    def test_accepts_single_ifd(self, tree):
        assert [t.id for t in iter_tags(tree[0]['GPSIFD'])] == \
            ['GPSVersionID', 'GPSLatitudeRef', 'GPSLatitude']

    def test_walks_all_roots(self):
        data = build_tiff_multi_ifd([[(256, 3, 1, 1)], [(257, 3, 1, 2)]])
        assert [t.id for t in iter_tags(decode(data))] == ['ImageWidth', 'ImageLength']

    def test_empty_tree(self):
        assert list(iter_tags([])) == []


class TestExtract:
    def test_all(self, tree):
        pairs = extract(tree)
        assert len(pairs) == len(LEAF_ORDER)
        assert ('Make', 'Canon') in pairs

    def test_exif_pointer_selects_nested_tags(self, tree):
        pairs = extract(tree, {34665})
        assert {tag_id for tag_id, _ in pairs} == {
            'ExposureTime', 'ExifVersion', 'Flash',
            'InteroperabilityIndex', 'InteroperabilityVersion',
        }
        assert ('ExposureTime', Fraction(1, 125)) in pairs

    def test_by_name_and_code_mixed(self, tree):
        pairs = extract(tree, ['ImageWidth', 33434, 'GPSLatitudeRef'])
        assert sorted(pairs, key=str) == sorted([
            ('ImageWidth', 64),
            ('ExposureTime', Fraction(1, 125)),
            ('GPSLatitudeRef', 'N'),
        ], key=str)

    def test_same_tag_in_several_ifds(self):
        data = build_tiff_multi_ifd([[(256, 3, 1, 100)], [(256, 3, 1, 50)]])
        assert sorted(v for _, v in extract(decode(data), {256})) == [50, 100]

    def test_single_name(self, tree):
        assert extract(tree, 'Make') == [('Make', 'Canon')]

    def test_single_code(self, tree):
        assert extract(tree, 256) == [('ImageWidth', 64)]

    def test_no_match(self, tree):
        assert extract(tree, {65000}) == []

    def test_unknown_tag_by_code(self):
        tree = decode(build_tiff([(65000, 3, 1, 9)]))
        assert extract(tree, {65000}) == [(65000, 9)]


class TestFindAndFlatten:
    def test_find_nested(self, tree):
        assert find(tree, 'Flash').value == {'Fired', 'AutoMode'}
        assert find(tree, 40965).id == 'InteroperabilityIFD'

    def test_find_missing(self, tree):
        assert find(tree, 'Artist') is None

    def test_flatten_paths(self, tree):
        paths = dict(flatten(tree))
        assert paths['IFD0/Make'] == 'Canon'
        assert paths['IFD0/ExifIFD/InteroperabilityIFD/InteroperabilityIndex'] == 'R98'
        assert paths['IFD0/GPSIFD/GPSLatitudeRef'] == 'N'
        assert len(paths) == len(LEAF_ORDER)


class TestToDict:
    def test_json_ready(self, tree):
        data = to_dict(tree)
        json.dumps(data)
        ifd0 = data['IFD0']
        assert ifd0['XResolution'] == '72/1'
        assert ifd0['Compression'] == 'LZW'
        assert ifd0['ExifIFD']['Flash'] == ['AutoMode', 'Fired']
        assert ifd0['ExifIFD']['ExifVersion'] == [2, 30]
        assert ifd0['GPSIFD']['GPSLatitude'] == ['51/1', '30/1', '2629/100']

    def test_bytes_as_hex(self):
        tree = decode(build_tiff([(65000, 7, 5, b'\x00\x01\x02\xfe\xff')]))
        assert to_dict(tree) == {'IFD0': {'65000': '000102feff'}}

    def test_single_ifd(self):
        ifd = decode(build_tiff([(34665, 4, 1, SubIFD([(33434, 5, 1, (1, 0))]))]))[0]
        assert to_dict(ifd) == {'ExifIFD': {'ExposureTime': None}}
