"""Panchayat - an in-memory model of a village election.

The library covers a single-constituency election from voter registration
to the declaration of the winner:

-   An election session is started by :func:`create_election` with a list of
    candidates. Voters are registered into it, cast their votes (each
    registered voter exactly once) and the results and the winner are read
    from it. See the :mod:`election` module.
-   Voters can be screened for eligibility under configurable rules with
    a validator built by :func:`create_vote_validator` from the
    :mod:`eligibility` module, independently of any election.
-   Votes counted in a tree of nested regions are summed by
    :func:`count_votes_in_regions` from the :mod:`region` module.
-   Vote tallies can be updated without modifying them by
    :func:`tally_pure` from the :mod:`tally` module.

Failures expected in normal use (malformed input, duplicate registrations,
repeated votes) are never raised; each operation reports them in its own
way, as documented on it.
"""

from panchayat.election import Election, create_election    # noqa: F401
from panchayat.eligibility import create_vote_validator    # noqa: F401
from panchayat.region import Region, count_votes_in_regions    # noqa: F401
from panchayat.tally import tally_pure    # noqa: F401
