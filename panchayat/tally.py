'''Vote tallies as immutable values.

A tally maps candidate identifiers to numbers of votes. The functions here
never modify the tallies they are given; every update returns a new
dictionary.
'''

import collections.abc
import logging
import operator
from numbers import Integral
from typing import Any, Dict, List, Mapping, Tuple

logger = logging.getLogger(__name__)


def tally_pure(current_tally: Mapping[str, int],
               candidate_id: str,
               ) -> Dict[str, int]:
    '''Return a new tally with one more vote for the given candidate.

    A candidate missing from the tally gets a count of 1. The input tally
    is left untouched and each call returns an independent dictionary.

    :param current_tally: Votes counted so far.
    :param candidate_id: Identifier of the candidate to add the vote to.
    :returns: The updated tally, or an empty dictionary if the tally is not
        a mapping, its count for the candidate is not an integer, or the
        candidate identifier is not a non-empty string.
    '''
    if not isinstance(current_tally, collections.abc.Mapping):
        logger.debug('invalid tally %r, returning empty', current_tally)
        return {}
    if not isinstance(candidate_id, str) or not candidate_id:
        logger.debug('invalid candidate id %r, returning empty', candidate_id)
        return {}
    count = current_tally.get(candidate_id, 0)
    if not isinstance(count, Integral) or isinstance(count, bool):
        logger.debug('invalid count %r for %s, returning empty',
                     count, candidate_id)
        return {}
    updated = dict(current_tally)
    updated[candidate_id] = count + 1
    return updated


def sorted_tally(tally: Mapping[Any, int]) -> List[Tuple[Any, int]]:
    '''Return tally items sorted by count, descending; ties keep their order.'''
    return sorted(tally.items(), key=operator.itemgetter(1), reverse=True)
