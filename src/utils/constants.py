WORLD_POPULATION = 8_000_000_000
DEFAULT_COUNTRY_POPULATION = 50_000_000

# Score at which the standing curve saturates
MAX_LIFE_SCORE = 30_000
STANDING_CURVE_EXPONENT = 0.7

WEALTH_SCORE_CAP = 20_000
KNOWLEDGE_SCORE_CAP = 10_000

COUNTRY_POPULATIONS = {
    'United States': 331_000_000,
    'China': 1_440_000_000,
    'India': 1_380_000_000,
    'Brazil': 215_000_000,
    'United Kingdom': 67_000_000,
    'Germany': 83_000_000,
    'France': 68_000_000,
    'Canada': 38_000_000,
    'Australia': 26_000_000,
    'Singapore': 6_000_000,
    'Spain': 47_000_000,
    'Italy': 60_000_000,
    'Japan': 125_000_000,
    'South Korea': 52_000_000,
    'Georgia': 4_000_000,
}

# LifeScore of the average citizen, used for "countries surpassed"
COUNTRY_AVERAGE_SCORES = [
    ('Chad', 2000),
    ('Madagascar', 2500),
    ('Afghanistan', 3000),
    ('Nepal', 4000),
    ('Cambodia', 4500),
    ('Bangladesh', 5000),
    ('Myanmar', 5500),
    ('Laos', 6000),
    ('Bhutan', 6500),
    ('Bolivia', 7000),
    ('Fiji', 7200),
    ('Honduras', 7500),
    ('Nicaragua', 8000),
    ('Moldova', 8500),
    ('Ukraine', 9000),
    ('Philippines', 10000),
    ('India', 11000),
    ('Indonesia', 12000),
    ('Brazil', 13000),
    ('Mexico', 14000),
    ('Turkey', 15000),
    ('Russia', 16000),
    ('Poland', 17000),
    ('South Korea', 18000),
    ('Spain', 19000),
    ('Italy', 20000),
    ('France', 21000),
    ('United Kingdom', 22000),
    ('Germany', 23000),
    ('Japan', 24000),
    ('Canada', 25000),
    ('Australia', 26000),
    ('Iceland', 27000),
    ('Luxembourg', 28000),
]

EDUCATION_POINTS = {
    'none': 0,
    'highschool': 1000,
    'associates': 1500,
    'bachelors': 2000,
    'masters': 2500,
    'doctorate': 3000,
    'phd': 3000,
    'other': 800,
}

HOME_ASSET_TYPES = frozenset({'home', 'property'})
VEHICLE_ASSET_TYPES = frozenset({'car', 'vehicle'})
BUSINESS_ASSET_TYPES = frozenset({'business'})
COLLECTIBLE_ASSET_TYPES = frozenset({'art', 'collectibles'})
LUXURY_ASSET_TYPES = frozenset({'jewelry', 'art', 'collectibles', 'luxury'})
TECHNOLOGY_ASSET_TYPES = frozenset({'technology'})

RARITIES = ('common', 'uncommon', 'rare', 'epic', 'legendary')

CATEGORIES = (
    'progress',
    'wealth',
    'knowledge',
    'assets',
    'community',
    'leaderboard',
    'legendary',
    'hidden-misc',
)

WELCOME_ACHIEVEMENT_ID = 'welcome-aboard'

STARTER_ACHIEVEMENT_IDS = (
    'profile-complete',
    'wealth-apprentice',
    'knowledge-seeker',
    'first-asset',
    'car-owner',
    'homeowner',
)

# (minimum score, level name)
SCORE_LEVELS = [
    (25000, 'Legendary'),
    (20000, 'Exceptional'),
    (15000, 'Elite'),
    (10000, 'Advanced'),
    (6000, 'Established'),
    (3000, 'Emerging'),
    (0, 'Developing'),
]
