import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import panchayat.ballot


@pytest.mark.parametrize(('error_cls', 'reason'), [
    (panchayat.ballot.InvalidVoterId, 'Invalid Voter ID'),
    (panchayat.ballot.InvalidCandidateId, 'Invalid Candidate ID'),
    (panchayat.ballot.VoterNotRegistered, 'Voter ID not registered!'),
    (panchayat.ballot.AlreadyVoted, 'Voter has already voted!'),
    (panchayat.ballot.CandidateNotFound, 'Candidate ID not registered!'),
])
def test_reasons(error_cls, reason):
    err = error_cls('X1')
    assert isinstance(err, panchayat.ballot.BallotError)
    assert str(err) == reason
    assert err.value == 'X1'


def test_ballot_frozen():
    ballot = panchayat.ballot.Ballot('V1', 'C1')
    with pytest.raises(AttributeError):
        ballot.voter_id = 'V2'
