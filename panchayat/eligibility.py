'''Configurable voter eligibility checks.

:func:`create_vote_validator` builds a standalone validation function from a
set of rules. Unlike the registration inside an election, the validator
reports why a voter is ineligible instead of just refusing them, and it does
not touch any election state, so it can be used to pre-screen voters.

The recognized rules are:

-   ``min_age`` - minimum age of an eligible voter (18 by default),
-   ``required_fields`` - names of fields the voter record must contain,
    checked in the given order (none by default).

The camel-case spellings ``minAge`` and ``requiredFields`` are also accepted
for rules coming from JSON-like sources.
'''

import collections.abc
import dataclasses
import logging
import math
from numbers import Real
from typing import Any, Callable, Dict, Iterable, Tuple

from panchayat.voter import MIN_VOTING_AGE

logger = logging.getLogger(__name__)

RULE_ALIASES: Dict[str, str] = {
    'minAge': 'min_age',
    'requiredFields': 'required_fields',
}


@dataclasses.dataclass(frozen=True)
class Eligibility:
    '''A verdict of an eligibility check.

    :param valid: Whether the voter is eligible.
    :param reason: Human-readable explanation of the verdict.
    '''
    valid: bool
    reason: str

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


ELIGIBLE = Eligibility(True, 'Voter is eligible')
INVALID_RULES = Eligibility(False, 'Invalid rules')
INVALID_VOTER = Eligibility(False, 'Invalid voter object')


class EligibilityValidator:
    '''Check whether a voter record satisfies the eligibility rules.

    :param min_age: Minimum age of an eligible voter.
    :param required_fields: Fields the voter record must contain, checked in
        this order; only the first missing one is reported.
    '''
    def __init__(self,
                 min_age: Real = MIN_VOTING_AGE,
                 required_fields: Iterable[str] = (),
                 ):
        self.min_age = min_age
        self.required_fields = tuple(required_fields)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'min_age': self.min_age,
            'required_fields': list(self.required_fields),
        }

    def __call__(self, voter: Any) -> Eligibility:
        '''Check the voter record.

        :param voter: A mapping describing the voter.
        :returns: The verdict; ineligible if the voter is not a mapping,
            lacks a required field, or has a missing, non-numeric or too low
            ``age``.
        '''
        if not isinstance(voter, collections.abc.Mapping):
            return INVALID_VOTER
        for field in self.required_fields:
            if field not in voter:
                return Eligibility(False, f'Missing field: {field}')
        if not _is_number(voter.get('age')) or voter['age'] < self.min_age:
            return Eligibility(False, f'Age must be at least {self.min_age}')
        return ELIGIBLE


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and not math.isnan(value)
    )


def _reject_all(voter: Any) -> Eligibility:
    return INVALID_RULES


def parse_rules(rules: Any) -> Tuple[Real, Tuple[str, ...]]:
    '''Extract the minimum age and required fields from the rules.

    :raises ValueError: If the rules are not a mapping or their values are
        of the wrong type.
    '''
    if not isinstance(rules, collections.abc.Mapping):
        raise ValueError(f'invalid eligibility rules: {rules!r}')
    rules = {RULE_ALIASES.get(key, key): val for key, val in rules.items()}
    min_age = rules.get('min_age')
    if min_age is None:
        min_age = MIN_VOTING_AGE
    elif not _is_number(min_age):
        raise ValueError(f'invalid minimum age: {min_age!r}')
    required_fields = rules.get('required_fields')
    if required_fields is None:
        required_fields = ()
    elif (isinstance(required_fields, (str, bytes))
            or not isinstance(required_fields, collections.abc.Iterable)):
        raise ValueError(f'invalid required fields: {required_fields!r}')
    required_fields = tuple(required_fields)
    if not all(isinstance(field, str) for field in required_fields):
        raise ValueError(f'invalid required fields: {required_fields!r}')
    return min_age, required_fields


def create_vote_validator(rules: Any) -> Callable[[Any], Eligibility]:
    '''Create a voter eligibility validator from the given rules.

    :param rules: A mapping with the optional ``min_age`` and
        ``required_fields`` rules.
    :returns: A function taking a voter record and returning its
        :class:`Eligibility`. If the rules are invalid, the function deems
        every voter ineligible with the reason ``'Invalid rules'``.
    '''
    try:
        min_age, required_fields = parse_rules(rules)
    except ValueError as err:
        logger.debug('%s, rejecting all voters', err)
        return _reject_all
    return EligibilityValidator(min_age, required_fields)
