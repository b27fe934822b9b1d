'''Candidate records and candidate descriptor parsing.

Candidates are passed to an election as descriptors - mappings with the
``id``, ``name`` and ``party`` keys (JSON-like input) or ready-made
:class:`Candidate` objects. Either way, the election keeps its own copy
in a :class:`Candidate` record, so the vote counts it accumulates never leak
into the caller's objects.
'''

from __future__ import annotations

import collections.abc
import dataclasses
from typing import Any, Dict, List, Iterable, Union


class CandidateError(Exception):
    '''A candidate descriptor is invalid.

    :param candidate: Candidate descriptor that was found to be invalid.
    :param expected: Description of what was expected instead.
    '''
    def __init__(self, candidate: Any, expected: Any = None):
        self.candidate = candidate
        self.expected = expected
        message = f'invalid candidate: {candidate!r}'
        if expected:
            message += f', must be {expected}'
        super().__init__(message)


@dataclasses.dataclass
class Candidate:
    '''A candidate standing in the election.

    :param id: Identifier of the candidate, unique within the election.
    :param name: Name of the candidate, in any customary text format.
    :param party: Party the candidate stands for.
    :param votes: Number of votes received so far.
    '''
    id: str
    name: str = ''
    party: str = ''
    votes: int = 0

    @classmethod
    def from_descriptor(cls,
                        descriptor: Union[Candidate, Dict[str, Any]],
                        ) -> Candidate:
        '''Create a fresh zero-vote candidate record from a descriptor.

        :param descriptor: A mapping with ``id``, ``name`` and ``party`` keys,
            or a :class:`Candidate` whose vote count is ignored.
        :raises CandidateError: If the descriptor is not a mapping or
            a candidate, or has no non-empty string identifier.
        '''
        if isinstance(descriptor, cls):
            fields = dataclasses.asdict(descriptor)
        elif isinstance(descriptor, collections.abc.Mapping):
            fields = descriptor
        else:
            raise CandidateError(descriptor, 'a mapping or a Candidate')
        cand_id = fields.get('id')
        if not isinstance(cand_id, str) or not cand_id:
            raise CandidateError(descriptor, 'identified by a non-empty string')
        return cls(
            id=cand_id,
            name=fields.get('name', ''),
            party=fields.get('party', ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'party': self.party,
            'votes': self.votes,
        }


def parse_candidates(descriptors: Iterable[Any]) -> List[Candidate]:
    '''Create zero-vote candidate records for an election.

    Duplicate identifiers are not checked; the election looks up the first
    candidate with a matching identifier.

    :param descriptors: A sequence of candidate descriptors.
    :raises CandidateError: If the descriptors are not a sequence or any
        of them is invalid.
    '''
    if (isinstance(descriptors, (str, bytes, collections.abc.Mapping))
            or not isinstance(descriptors, collections.abc.Iterable)):
        raise CandidateError(descriptors, 'a sequence of candidates')
    return [Candidate.from_descriptor(desc) for desc in descriptors]
