"""Constants and static tables for the NFL division quiz."""

from .models import Team

TEAMS_PER_DIVISION = 4
TOTAL_TEAMS = 32

# NFL teams organized by division, in declaration order
NFL_DIVISIONS = {
    'AFC East': (
        Team('Buffalo Bills', 'buf'),
        Team('Miami Dolphins', 'mia'),
        Team('New England Patriots', 'ne'),
        Team('New York Jets', 'nyj'),
    ),
    'AFC North': (
        Team('Baltimore Ravens', 'bal'),
        Team('Cincinnati Bengals', 'cin'),
        Team('Cleveland Browns', 'cle'),
        Team('Pittsburgh Steelers', 'pit'),
    ),
    'AFC South': (
        Team('Houston Texans', 'hou'),
        Team('Indianapolis Colts', 'ind'),
        Team('Jacksonville Jaguars', 'jax'),
        Team('Tennessee Titans', 'ten'),
    ),
    'AFC West': (
        Team('Denver Broncos', 'den'),
        Team('Kansas City Chiefs', 'kc'),
        Team('Las Vegas Raiders', 'lv'),
        Team('Los Angeles Chargers', 'lac'),
    ),
    'NFC East': (
        Team('Dallas Cowboys', 'dal'),
        Team('New York Giants', 'nyg'),
        Team('Philadelphia Eagles', 'phi'),
        Team('Washington Commanders', 'wsh'),
    ),
    'NFC North': (
        Team('Chicago Bears', 'chi'),
        Team('Detroit Lions', 'det'),
        Team('Green Bay Packers', 'gb'),
        Team('Minnesota Vikings', 'min'),
    ),
    'NFC South': (
        Team('Atlanta Falcons', 'atl'),
        Team('Carolina Panthers', 'car'),
        Team('New Orleans Saints', 'no'),
        Team('Tampa Bay Buccaneers', 'tb'),
    ),
    'NFC West': (
        Team('Arizona Cardinals', 'ari'),
        Team('Los Angeles Rams', 'la'),
        Team('San Francisco 49ers', 'sf'),
        Team('Seattle Seahawks', 'sea'),
    ),
}

# Display order used by the quiz screens: North, East, South, West per conference
AFC_DIVISIONS = ['AFC North', 'AFC East', 'AFC South', 'AFC West']
NFC_DIVISIONS = ['NFC North', 'NFC East', 'NFC South', 'NFC West']
ALL_DIVISIONS = AFC_DIVISIONS + NFC_DIVISIONS

CONFERENCES = ('AFC', 'NFC')

# ESPN team ids mapped to our abbreviations
ESPN_TEAM_IDS = {
    'buf': 2, 'mia': 15, 'ne': 17, 'nyj': 20,     # AFC East
    'bal': 33, 'cin': 4, 'cle': 5, 'pit': 23,     # AFC North
    'hou': 34, 'ind': 11, 'jax': 30, 'ten': 10,   # AFC South
    'den': 7, 'kc': 12, 'lv': 13, 'lac': 24,      # AFC West
    'dal': 6, 'nyg': 19, 'phi': 21, 'wsh': 28,    # NFC East
    'chi': 3, 'det': 8, 'gb': 9, 'min': 16,       # NFC North
    'atl': 1, 'car': 29, 'no': 18, 'tb': 27,      # NFC South
    'ari': 22, 'la': 14, 'sf': 25, 'sea': 26,     # NFC West
}

# ESPN endpoints and image hosts
ESPN_DEPTH_CHART_URL = (
    'https://sports.core.api.espn.com/v2/sports/football/leagues/nfl'
    '/seasons/{season}/teams/{team_id}/depthcharts'
)
LOGO_URL_TEMPLATE = 'https://a.espncdn.com/i/teamlogos/nfl/500/{abbr}.png'
HEADSHOT_URL_TEMPLATE = 'https://a.espncdn.com/i/headshots/nfl/players/full/{athlete_id}.png'

# Retry cap when picking a team that hasn't been shown yet
MAX_REPEAT_ATTEMPTS = 100

# Share grid
SHARE_GRID_WIDTH = 8
GLYPH_CORRECT = '\U0001F7E9'    # green square
GLYPH_INCORRECT = '\U0001F7E5'  # red square
GLYPH_MISSING = '\u2B1C'        # white square
