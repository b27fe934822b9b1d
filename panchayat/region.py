'''Vote aggregation over hierarchical regions.

A region tree models the geography of an election: each region (a ward,
a village, a block...) carries the votes counted locally and any number of
subregions. Trees can be built from :class:`Region` objects or given as
nested mappings with the ``name``, ``votes`` and ``subRegions`` keys
(``sub_regions`` is accepted as well), the form they take in JSON-like input.
'''

from __future__ import annotations

import collections.abc
import dataclasses
import logging
import math
from numbers import Real
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

SUBREGION_KEYS = ('subRegions', 'sub_regions')


@dataclasses.dataclass
class Region:
    '''A region with its locally counted votes.

    :param name: Name of the region.
    :param votes: Number of votes counted in the region itself, excluding its
        subregions.
    :param sub_regions: Regions nested in this one.
    '''
    name: str
    votes: int = 0
    sub_regions: List[Region] = dataclasses.field(default_factory=list)

    @classmethod
    def from_dict(cls, tree: Dict[str, Any]) -> Region:
        '''Build a region tree from nested mappings.

        :raises ValueError: If the tree or any of its subregions is not
            a mapping.
        '''
        if not isinstance(tree, collections.abc.Mapping):
            raise ValueError(f'invalid region: {tree!r}')
        return cls(
            name=tree.get('name', ''),
            votes=tree.get('votes', 0),
            sub_regions=[cls.from_dict(sub) for sub in _subregions(tree)],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'votes': self.votes,
            'subRegions': [sub.to_dict() for sub in self.sub_regions],
        }

    def total_votes(self) -> int:
        '''Return the votes of this region and all its subregions.'''
        return count_votes_in_regions(self)


RegionTree = Union[Region, Dict[str, Any]]


def _is_region(node: Any) -> bool:
    return isinstance(node, (Region, collections.abc.Mapping))


def _local_votes(node: RegionTree) -> Real:
    if isinstance(node, Region):
        votes = node.votes
    else:
        votes = node.get('votes')
    if (not votes
            or not isinstance(votes, Real)
            or isinstance(votes, bool)
            or math.isnan(votes)):
        return 0
    return votes


def _subregions(node: RegionTree) -> List[Any]:
    if isinstance(node, Region):
        subs = node.sub_regions
    else:
        subs = None
        for key in SUBREGION_KEYS:
            if key in node:
                subs = node[key]
                break
    if (isinstance(subs, (str, bytes, collections.abc.Mapping))
            or not isinstance(subs, collections.abc.Iterable)):
        return []
    return list(subs)


def _region_name(node: RegionTree) -> Any:
    if isinstance(node, Region):
        return node.name
    return node.get('name')


def count_votes_in_regions(tree: Any) -> int:
    '''Count total votes in a region and all of its subregions.

    The tree is walked depth-first with an explicit stack, so arbitrarily
    deep trees can be counted. A region that is its own ancestor (a cycle)
    is skipped where it reappears; a region shared by several parents is
    counted under each of them.

    :param tree: The root region, as a :class:`Region` or a mapping.
    :returns: Sum of the votes of all regions in the tree. Regions that are
        not mappings (including None) count as zero, as do missing, zero or
        non-numeric vote counts. Regions with no or malformed subregion
        lists are treated as leaves.
    '''
    if not _is_region(tree):
        logger.debug('invalid region tree %r, counting zero', tree)
        return 0
    total = 0
    ancestors = set()
    stack = [(tree, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            ancestors.discard(id(node))
            continue
        if id(node) in ancestors:
            logger.debug('region %r contains itself, skipping',
                         _region_name(node))
            continue
        ancestors.add(id(node))
        total += _local_votes(node)
        stack.append((node, True))
        stack.extend(
            (sub, False) for sub in _subregions(node) if _is_region(sub)
        )
    return total
