import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import panchayat.region
from panchayat.region import Region


@pytest.fixture
def district():
    return {
        'name': 'root', 'votes': 5, 'subRegions': [
            {'name': 'a', 'votes': 3, 'subRegions': []},
            {'name': 'b', 'votes': 2, 'subRegions': [
                {'name': 'c', 'votes': 1, 'subRegions': []},
            ]},
        ]
    }


def test_nested(district):
    assert panchayat.region.count_votes_in_regions(district) == 11


def test_not_mutated(district):
    before = repr(district)
    panchayat.region.count_votes_in_regions(district)
    assert repr(district) == before


@pytest.mark.parametrize('tree', [None, 5, 'root', ['a', 'b'], ()])
def test_invalid_tree(tree):
    assert panchayat.region.count_votes_in_regions(tree) == 0


@pytest.mark.parametrize(('tree', 'total'), [
    ({}, 0),
    ({'name': 'leaf', 'votes': 7}, 7),
    ({'name': 'leaf', 'votes': 7, 'subRegions': None}, 7),
    ({'name': 'leaf', 'votes': 7, 'subRegions': 'abc'}, 7),
    ({'name': 'leaf', 'votes': None, 'subRegions': []}, 0),
    ({'name': 'leaf', 'votes': '7'}, 0),
    ({'name': 'x', 'votes': 1, 'subRegions': [None, 4, {'votes': 2}]}, 3),
    ({'name': 'x', 'votes': 1, 'sub_regions': [{'votes': 2}]}, 3),
    ({'name': 'x', 'subRegions': [{'subRegions': [{'votes': 9}]}]}, 9),
])
def test_edge_trees(tree, total):
    assert panchayat.region.count_votes_in_regions(tree) == total


def test_region_objects(district):
    region = Region.from_dict(district)
    assert region.sub_regions[1].sub_regions[0] == Region('c', 1)
    assert region.total_votes() == 11
    assert panchayat.region.count_votes_in_regions(region) == 11
    assert region.to_dict() == district


def test_mixed_tree():
    tree = Region('root', 1, [
        Region('a', 2),
        {'name': 'b', 'votes': 3, 'subRegions': [Region('c', 4)]},
    ])
    assert panchayat.region.count_votes_in_regions(tree) == 10


def test_invalid_from_dict():
    with pytest.raises(ValueError):
        Region.from_dict({'name': 'x', 'subRegions': [None]})


def test_deep_tree():
    depth = 10000
    tree = {'name': 'leaf', 'votes': 1, 'subRegions': []}
    for i in range(depth - 1):
        tree = {'name': str(i), 'votes': 1, 'subRegions': [tree]}
    assert panchayat.region.count_votes_in_regions(tree) == depth


def test_wide_tree():
    tree = {'name': 'state', 'votes': 0, 'subRegions': [
        {'name': f'block{i}', 'votes': i, 'subRegions': [
            {'name': f'village{i}-{j}', 'votes': 1} for j in range(10)
        ]} for i in range(100)
    ]}
    assert panchayat.region.count_votes_in_regions(tree) == sum(range(100)) + 1000


def test_cycle_counted_once():
    root = {'name': 'root', 'votes': 5, 'subRegions': []}
    child = {'name': 'a', 'votes': 3, 'subRegions': [root]}
    root['subRegions'].append(child)
    assert panchayat.region.count_votes_in_regions(root) == 8


def test_self_cycle_region():
    region = Region('loop', 4)
    region.sub_regions.append(region)
    assert panchayat.region.count_votes_in_regions(region) == 4


def test_shared_subregion_counted_per_parent():
    shared = {'name': 'shared', 'votes': 2}
    tree = {'name': 'root', 'votes': 1, 'subRegions': [
        {'name': 'a', 'votes': 0, 'subRegions': [shared]},
        {'name': 'b', 'votes': 0, 'subRegions': [shared]},
    ]}
    assert panchayat.region.count_votes_in_regions(tree) == 5
