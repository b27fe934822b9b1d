'''Voter records and the voter registration validator.

A voter applies for registration with a mapping holding its ``id``,
``name`` and ``age``. The :class:`RegistrationValidator` checks the
application and raises a subclass of :class:`VoterError` if it is
unacceptable; the election catches these errors and reports a plain
failure to the caller.
'''

import abc
import collections.abc
import dataclasses
from numbers import Integral
from typing import Any, Collection, Dict, Optional, Tuple


MIN_VOTING_AGE: int = 18
'''The minimum age at which a person can register to vote.'''

MAX_VOTER_AGE: int = 122
'''The maximum plausible age of a registering voter.'''


class VoterError(Exception, metaclass=abc.ABCMeta):
    '''A voter cannot be registered.'''
    pass


class VoterTypeError(VoterError):
    '''A voter application is not a mapping.

    :param voter: The invalid application.
    '''
    def __init__(self, voter: Any):
        self.voter = voter
        super().__init__(
            f'invalid voter type: {type(voter).__name__}, must be a mapping'
        )


class VoterFieldError(VoterError):
    '''A voter application field is missing or malformed.

    :param field: Name of the field.
    :param value: The invalid value; None if the field is missing.
    '''
    def __init__(self, field: str, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(f'invalid voter {field}: {value!r}')


class VoterAgeError(VoterError):
    '''A voter is too young or too old to register.

    :param age: Age of the voter.
    :param min_age: Minimum permissible age.
    :param max_age: Maximum permissible age.
    '''
    def __init__(self,
                 age: int,
                 min_age: Optional[int] = None,
                 max_age: Optional[int] = None,
                 ):
        self.age = age
        self.min_age = min_age
        self.max_age = max_age
        super().__init__(
            f'invalid voter age: {age}, must be >={min_age} and <={max_age}'
        )


class DuplicateVoterError(VoterError):
    '''A voter with the same identifier is already registered.

    :param voter_id: The duplicate identifier.
    '''
    def __init__(self, voter_id: str):
        self.voter_id = voter_id
        super().__init__(f'voter already registered: {voter_id}')


@dataclasses.dataclass
class Voter:
    '''A registered voter.

    :param id: Identifier of the voter, unique among the registered.
    :param name: Name of the voter.
    :param age: Age of the voter in years.
    :param voted: Whether the voter has already cast their vote.
    '''
    id: str
    name: str
    age: int
    voted: bool = False


def is_nonempty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


class RegistrationValidator:
    '''Validate a voter application for registration.

    :param age_bounds: A tuple with lower and upper bounds (inclusive)
        for the age of the voter.
    '''
    def __init__(self,
                 age_bounds: Tuple[int, int] = (MIN_VOTING_AGE, MAX_VOTER_AGE),
                 ):
        self.min_age, self.max_age = age_bounds

    def to_dict(self) -> Dict[str, Any]:
        return {'age_bounds': [self.min_age, self.max_age]}

    def validate(self,
                 voter: Any,
                 registered: Collection[str] = (),
                 ) -> Voter:
        '''Check the application and create a not-yet-voted voter record.

        :param voter: Voter application to be checked.
        :param registered: Identifiers of voters already registered.
        :raises VoterTypeError: If the application is not a mapping.
        :raises VoterFieldError: If the identifier or name is not a non-empty
            string or the age is not an integer.
        :raises VoterAgeError: If the age is out of the allowed bounds.
        :raises DuplicateVoterError: If the identifier is already registered.
        '''
        if not isinstance(voter, collections.abc.Mapping):
            raise VoterTypeError(voter)
        for field in ('id', 'name'):
            if not is_nonempty_string(voter.get(field)):
                raise VoterFieldError(field, voter.get(field))
        age = voter.get('age')
        if not isinstance(age, Integral) or isinstance(age, bool):
            raise VoterFieldError('age', age)
        if not self.min_age <= age <= self.max_age:
            raise VoterAgeError(age, self.min_age, self.max_age)
        if voter['id'] in registered:
            raise DuplicateVoterError(voter['id'])
        return Voter(id=voter['id'], name=voter['name'], age=int(age))
