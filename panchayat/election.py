'''The election session: voter registration, voting and results.

An :class:`Election` holds the candidates and the voter register of a single
constituency. Its state is only changed by registering voters and casting
votes; everything else reads it and returns fresh copies.

Failures expected in normal operation are not raised to the caller:
registration answers with a boolean and vote casting calls one of two
callbacks, passing the rejection reason to the error one.
'''

import functools
import logging
import operator
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

import panchayat.tally
from panchayat.ballot import Ballot, BallotError, InvalidVoterId, \
    InvalidCandidateId, VoterNotRegistered, AlreadyVoted, CandidateNotFound
from panchayat.candidate import Candidate, parse_candidates
from panchayat.voter import Voter, VoterError, RegistrationValidator, \
    is_nonempty_string

logger = logging.getLogger(__name__)

R = TypeVar('R')
Comparator = Callable[[Dict[str, Any], Dict[str, Any]], int]

DEFAULT_REGISTRATION_VALIDATOR = RegistrationValidator()


class Election:
    '''A single-constituency election session.

    :param candidates: Candidate descriptors - mappings with ``id``, ``name``
        and ``party`` keys, or :class:`Candidate` objects. Each gets its own
        record with zero votes; the descriptors themselves are not modified.
    :param registration_validator: Validator of voter applications. The
        default accepts voters aged 18 to 122.
    :raises CandidateError: If the candidates are not a sequence of valid
        candidate descriptors.
    '''
    def __init__(self,
                 candidates: Iterable[Any],
                 registration_validator: Optional[RegistrationValidator]
                 = None,
                 ):
        if registration_validator is None:
            registration_validator = DEFAULT_REGISTRATION_VALIDATOR
        self._candidates: List[Candidate] = parse_candidates(candidates)
        self._voters: Dict[str, Voter] = {}
        self._registration_validator = registration_validator

    def __len__(self) -> int:
        return len(self._candidates)

    def __repr__(self) -> str:
        return (
            f'<Election({len(self._candidates)} candidates, '
            f'{len(self._voters)} voters)>'
        )

    @property
    def total_votes(self) -> int:
        '''Number of votes cast successfully.'''
        return sum(cand.votes for cand in self._candidates)

    def is_registered(self, voter_id: str) -> bool:
        return voter_id in self._voters

    def has_voted(self, voter_id: str) -> bool:
        '''Return True if the voter is registered and has voted.'''
        voter = self._voters.get(voter_id)
        return voter is not None and voter.voted

    def register_voter(self, voter: Any) -> bool:
        '''Add a voter to the register.

        :param voter: A mapping with the voter's ``id`` (non-empty string),
            ``name`` (non-empty string) and ``age`` (integer).
        :returns: True if the voter was registered. False if the application
            was malformed, the voter is under 18 or over 122 years of age,
            or a voter with the same identifier is already registered;
            the register is left unchanged in that case.
        '''
        try:
            record = self._registration_validator.validate(
                voter, registered=self._voters
            )
        except VoterError as err:
            logger.debug('registration rejected: %s', err)
            return False
        self._voters[record.id] = record
        logger.info('registered voter %s', record.id)
        return True

    def cast_vote(self,
                  voter_id: str,
                  candidate_id: str,
                  on_success: Callable[[Ballot], R],
                  on_error: Callable[[str], R],
                  ) -> R:
        '''Cast a vote of a registered voter for a candidate.

        Exactly one of the callbacks is called. The checks are done in the
        following order and the first failing one determines the reason
        given to `on_error`:

        1.  the voter identifier is not a non-empty string
            (``'Invalid Voter ID'``),
        2.  the candidate identifier is not a non-empty string
            (``'Invalid Candidate ID'``),
        3.  the voter is not registered (``'Voter ID not registered!'``),
        4.  the voter has already voted (``'Voter has already voted!'``),
        5.  there is no such candidate (``'Candidate ID not registered!'``).

        If all pass, the voter is marked as having voted, the candidate
        receives one vote and `on_success` gets a :class:`Ballot` receipt.
        Nothing changes on failure.

        :param voter_id: Identifier of the voting voter.
        :param candidate_id: Identifier of the candidate voted for.
        :param on_success: Called with the ballot receipt if the vote counts.
        :param on_error: Called with the rejection reason otherwise.
        :returns: Whatever the called callback returns.
        '''
        try:
            voter, candidate = self._check_ballot(voter_id, candidate_id)
        except BallotError as err:
            logger.debug('ballot of %r for %r rejected: %s',
                         voter_id, candidate_id, err)
            return on_error(str(err))
        voter.voted = True
        candidate.votes += 1
        logger.info('vote cast by %s for %s', voter_id, candidate_id)
        return on_success(Ballot(voter_id, candidate_id))

    def _check_ballot(self, voter_id: str, candidate_id: str):
        if not is_nonempty_string(voter_id):
            raise InvalidVoterId(voter_id)
        if not is_nonempty_string(candidate_id):
            raise InvalidCandidateId(candidate_id)
        voter = self._voters.get(voter_id)
        if voter is None:
            raise VoterNotRegistered(voter_id)
        if voter.voted:
            raise AlreadyVoted(voter_id)
        candidate = self._find_candidate(candidate_id)
        if candidate is None:
            raise CandidateNotFound(candidate_id)
        return voter, candidate

    def _find_candidate(self, candidate_id: str) -> Optional[Candidate]:
        for cand in self._candidates:
            if cand.id == candidate_id:
                return cand
        return None

    def get_results(self,
                    comparator: Optional[Comparator] = None,
                    ) -> List[Dict[str, Any]]:
        '''Return the results of all candidates.

        :param comparator: An old-style comparison function taking two
            result records and returning a negative number, zero or
            a positive number. If not given or not callable, the results are
            ordered by votes in descending order, candidates with equal
            votes staying in the order they were given to the election.
        :returns: A new list of ``{'id', 'name', 'party', 'votes'}``
            dictionaries, one per candidate.
        '''
        results = [cand.to_dict() for cand in self._candidates]
        if not callable(comparator):
            return sorted(results, key=operator.itemgetter('votes'),
                          reverse=True)
        else:
            return sorted(results, key=functools.cmp_to_key(comparator))

    def get_tally(self) -> Dict[str, int]:
        '''Return a new tally of votes per candidate identifier.'''
        tally = {}
        for cand in self._candidates:
            tally.setdefault(cand.id, cand.votes)
        return tally

    def get_winner(self) -> Optional[Dict[str, Any]]:
        '''Return the result record of the candidate with the most votes.

        Ties are resolved in favour of the candidate given first.

        :returns: The winner's ``{'id', 'name', 'party', 'votes'}``
            dictionary; None if there are no candidates or no votes were
            cast at all.
        '''
        if not self._candidates:
            return None
        best_id, best_votes = panchayat.tally.sorted_tally(self.get_tally())[0]
        if best_votes <= 0:
            return None
        return self._find_candidate(best_id).to_dict()


def create_election(candidates: Iterable[Any]) -> Election:
    '''Start an election session with the given candidates.

    :param candidates: Candidate descriptors, see :class:`Election`.
    '''
    return Election(candidates)
