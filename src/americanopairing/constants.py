# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
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
SAVE_FILE_EXTENSION = ".json"

# Roster limits
MIN_PLAYERS = 4  # two teams of two

# Courts
MIN_COURTS = 1
DEFAULT_COURTS = 1

# Match duration in minutes
DEFAULT_MATCH_DURATION_MINUTES = 10

DEFAULT_TOURNAMENT_NAME = "Americano"

# Round numbering: 0 means the tournament has not started
NOT_STARTED_ROUND = 0

# Ranking keys
RANK_WINS = "wins"
RANK_GAME_DIFFERENCE = "game_difference"
RANK_GAMES_FOR = "games_for"
RANK_FEWEST_LOSSES = "fewest_losses"

# Default display names for ranking keys
RANKING_NAMES = {
    RANK_WINS: "Wins",
    RANK_GAME_DIFFERENCE: "Game Difference",
    RANK_GAMES_FOR: "Games Won",
    RANK_FEWEST_LOSSES: "Fewest Losses",
}

# Leaderboard order: wins, then game difference, then games won
DEFAULT_RANKING_ORDER = [
    RANK_WINS,
    RANK_GAME_DIFFERENCE,
    RANK_GAMES_FOR,
]

# Logging
LOG_LEVEL_ENV_VAR = "AMERICANO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
