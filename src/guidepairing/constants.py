# Guide Pairing
# Copyright (C) 2025  Guide Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Application ---
APP_NAME = "Guide Pairing"
APP_VERSION = "0.3.0"

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
SAVE_FILE_FILTER = f"Event Files (*{SAVE_FILE_EXTENSION});;All Files (*)"

# Environment variable naming an editor config JSON file
CONFIG_ENV_VAR = "GUIDEPAIRING_CONFIG"

# Roles
ROLE_ATHLETE = "athlete"
ROLE_GUIDE = "guide"

# RSVP statuses
STATUS_YES = "yes"
STATUS_MAYBE = "maybe"
STATUS_NO = "no"
PAIRABLE_STATUSES = (STATUS_YES, STATUS_MAYBE)

# Activities a sign-up can declare
ACTIVITY_RUN = "run"
ACTIVITY_RUN_WALK = "run/walk"
ACTIVITY_ROLL = "roll"
ACTIVITY_WALK = "walk"
ACTIVITIES = (ACTIVITY_RUN, ACTIVITY_RUN_WALK, ACTIVITY_ROLL, ACTIVITY_WALK)
# Only these activities carry a pace
PACED_ACTIVITIES = (ACTIVITY_RUN, ACTIVITY_ROLL)

# Pace entry limits (minutes per mile)
PACE_MIN_MINUTES = 6
PACE_MAX_MINUTES = 20
PACE_SECOND_STEPS = (0, 15, 30, 45)

# Pace compatibility severities
SEVERITY_NONE = "none"
SEVERITY_SLIGHT = "slight"
SEVERITY_SIGNIFICANT = "significant"

# Athlete paces at or below this value use the faster-regime thresholds
FAST_REGIME_MAX_PACE = 10.0
# (slight, significant) minimum differences in minutes per mile
FAST_REGIME_THRESHOLDS = (0.5, 1.0)
SLOW_REGIME_THRESHOLDS = (1.0, 2.0)

# Reserved highlight colours for guide rows
SEVERITY_COLORS = {
    SEVERITY_SLIGHT: "#f5c542",
    SEVERITY_SIGNIFICANT: "#e0533d",
}

# Accessible label suffixes
SEVERITY_LABEL_SUFFIXES = {
    SEVERITY_NONE: "",
    SEVERITY_SLIGHT: ", slightly slower pace",
    SEVERITY_SIGNIFICANT: ", significantly slower pace",
}

NO_PACE_LABEL = "no pace"

# Sort directions for roster lists
SORT_ASCENDING = "ascending"  # slowest first
SORT_DESCENDING = "descending"  # fastest first
DEFAULT_SORT_DIRECTION = SORT_DESCENDING

# Validation rejection reasons
REASON_SELF = "cannot pair with self"
REASON_CANDIDATE_NOT_FOUND = "candidate not found"
REASON_TARGET_NOT_FOUND = "athlete not found"
REASON_TARGET_NOT_ATHLETE = "target is not an athlete"
REASON_ALREADY_EXISTS = "pairing already exists"
REASON_GUIDE_TAKEN = "guide already paired with another athlete"
REASON_HAS_OWN_PAIRINGS = "athlete already has their own pairings"
REASON_ATHLETE_TAKEN = "athlete already paired with another athlete"
