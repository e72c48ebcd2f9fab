"""Type hints used in Guide Pairing."""

from typing import Dict, List, Literal

# Participant roles
Role = Literal["athlete", "guide"]

# RSVP response on a sign-up
SignUpStatus = Literal["yes", "maybe", "no"]

Activity = Literal["run", "run/walk", "roll", "walk"]

# Pace compatibility between an athlete and a slower guide
Severity = Literal["none", "slight", "significant"]

# ascending = slowest first, descending = fastest first
SortDirection = Literal["ascending", "descending"]

# Opaque user identifiers
UserId = str
AthleteId = str

# Wire shape of a single assignment entry and of the whole field
PairingEntryDict = Dict[str, List[UserId]]
PairingsDict = Dict[AthleteId, PairingEntryDict]

#  LocalWords:  PairingEntryDict PairingsDict
