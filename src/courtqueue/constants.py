# Court Queue
# Copyright (C) 2025  Court Queue developers
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

# --- Constants ---

# Match shape (doubles)
PLAYERS_PER_MATCH = 4
PLAYERS_PER_TEAM = 2
TEAM_A = "A"
TEAM_B = "B"

# Match status tags
STATUS_QUEUED = "queued"
STATUS_PLAYING = "playing"
STATUS_COMPLETED = "completed"

# Queue generation defaults
DEFAULT_MAX_QUEUE_ROUNDS = 3
DEFAULT_RECENCY_WINDOW = 10

# Hard fairness pre-filter: once this many players share the minimum usage,
# a candidate must contain at least MIN_USAGE_MEMBERS_REQUIRED of them.
FAIRNESS_FILTER_THRESHOLD = 4
MIN_USAGE_MEMBERS_REQUIRED = 3

# Score weights (lower score = better match), highest priority first
WEIGHT_UNDERUSED_BONUS = 1_000_000  # subtracted per player at minimum usage
WEIGHT_USAGE_SPREAD = 100_000
WEIGHT_TOTAL_USAGE = 10_000
WEIGHT_TEAMMATE_REPEAT = 5_000
WEIGHT_OPPONENT_REPEAT = 3_000
WEIGHT_LIFETIME_MATCHES = 100
WEIGHT_RECENT_INTERACTION = 10

# Multiplier applied to each recency step in the interaction score
RECENCY_STEP_POINTS = 2
