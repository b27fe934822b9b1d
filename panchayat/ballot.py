'''Ballot receipts and reasons for rejecting a ballot.

Each kind of rejection is a subclass of :class:`BallotError` whose message is
the human-readable reason reported to the voter. The election raises these
internally while checking a ballot and hands the message to the error
callback given to :meth:`panchayat.election.Election.cast_vote`.
'''

import dataclasses
from typing import Any, Dict


class BallotError(Exception):
    '''A ballot cannot be accepted.

    :param value: The identifier that caused the rejection.
    '''
    reason: str = NotImplemented

    def __init__(self, value: Any = None):
        self.value = value
        super().__init__(self.reason)


class InvalidVoterId(BallotError):
    '''The voter identifier is not a non-empty string.'''
    reason = 'Invalid Voter ID'


class InvalidCandidateId(BallotError):
    '''The candidate identifier is not a non-empty string.'''
    reason = 'Invalid Candidate ID'


class VoterNotRegistered(BallotError):
    reason = 'Voter ID not registered!'


class AlreadyVoted(BallotError):
    reason = 'Voter has already voted!'


class CandidateNotFound(BallotError):
    '''No candidate of the election has the identifier.'''
    reason = 'Candidate ID not registered!'


@dataclasses.dataclass(frozen=True)
class Ballot:
    '''A receipt of an accepted vote.

    :param voter_id: Identifier of the voter who cast the vote.
    :param candidate_id: Identifier of the candidate voted for.
    '''
    voter_id: str
    candidate_id: str

    def to_dict(self) -> Dict[str, str]:
        return dataclasses.asdict(self)
