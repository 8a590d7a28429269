"""Immutable constants for the Matchday Discord bot."""

# football-data.org v4
MATCHES_API_URL = "https://api.football-data.org/v4/matches"
AUTH_HEADER = "X-Auth-Token"

# Lexical forms
UTC_TIMESTAMP_FORMAT = "YYYY-MM-DD HH:mm:ss"
KICKOFF_FORMAT = "hh:mm A"
TAB_LABEL_FORMAT = "ddd, MMM D"
LOCALE = "en"

# Date tabs: offsets in days from local today
TAB_OFFSETS = (-1, 0, 1, 2, 3, 4)
RELATIVE_TAB_LABELS = {-1: "Yesterday", 0: "Today", 1: "Tomorrow"}
DEFAULT_TAB_INDEX = 1

# Fetch window: yesterday through +6 days
WINDOW_START_OFFSET = -1
WINDOW_LENGTH_DAYS = 7

# Match status vocabulary (provider tags)
STATUS_SCHEDULED = "SCHEDULED"
STATUS_IN_PLAY = "IN_PLAY"
STATUS_PAUSED = "PAUSED"
STATUS_LIVE = "LIVE"
STATUS_FINISHED = "FINISHED"

NOT_LIVE_STATUSES = frozenset({STATUS_SCHEDULED, STATUS_FINISHED})
SCORE_STATUSES = frozenset(
    {STATUS_FINISHED, STATUS_IN_PLAY, STATUS_PAUSED, STATUS_LIVE}
)

UNKNOWN_TEAM = "TBD"

# Discord
MESSAGE_LIMIT = 2000
TABS_VIEW_TIMEOUT = 300.0
DEFAULT_COOLDOWN_SECONDS = "30"

# User-facing messages
LIVE_HEADER = "🔴 **Live Match**"
NO_LIVE_MATCHES = "No live matches right now."
NO_MATCHES_ON_DAY = "No matches on {label}."
LIVE_BADGE = "`LIVE`"
ERROR_FETCH = "❌ Error: {message}"
ERROR_GENERIC = "❌ Something went wrong while loading matches."
ERROR_RATE_LIMITED = "⏳ Slow down a little, matches were just loaded."
