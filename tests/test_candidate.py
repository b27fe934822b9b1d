import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import panchayat.candidate
from panchayat.candidate import Candidate, CandidateError


def test_from_descriptor():
    cand = Candidate.from_descriptor({'id': 'C1', 'name': 'Ram', 'party': 'Janata',
                                      'votes': 10})
    assert cand == Candidate('C1', 'Ram', 'Janata', 0)
    assert cand.to_dict() == {'id': 'C1', 'name': 'Ram', 'party': 'Janata', 'votes': 0}


def test_from_candidate_copies():
    original = Candidate('C1', 'Ram', 'Janata', votes=3)
    cand = Candidate.from_descriptor(original)
    assert cand is not original
    assert cand.votes == 0
    assert original.votes == 3


def test_independent_without_party():
    assert Candidate.from_descriptor({'id': 'C9'}) == Candidate('C9', '', '')


def test_parse_generator():
    cands = panchayat.candidate.parse_candidates(
        {'id': f'C{i}', 'name': str(i), 'party': 'P'} for i in range(3)
    )
    assert [cand.id for cand in cands] == ['C0', 'C1', 'C2']


def test_error():
    with pytest.raises(CandidateError) as excinfo:
        Candidate.from_descriptor({'id': 5})
    assert excinfo.value.candidate == {'id': 5}
    assert 'non-empty string' in str(excinfo.value)
