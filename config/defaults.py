"""Default configuration constants for the Modular Project Configurator."""

# Unit types in fixed evaluation order (also the optimizer's tie-break order)
UNIT_TYPES = ["studio", "oneBed", "twoBed", "threeBed"]

UNIT_TYPE_LABELS = {
    "studio": "Studio",
    "oneBed": "1 Bedroom",
    "twoBed": "2 Bedroom",
    "threeBed": "3 Bedroom",
}

# Modular unit widths along the building length (ft)
UNIT_WIDTHS = {
    "studio": 12,
    "oneBed": 14,
    "twoBed": 26,    # two 13' modules
    "threeBed": 28,  # two 14' modules
}

# Module depths perpendicular to the building length (ft)
UNIT_DEPTHS = {
    "studio": 28,
    "oneBed": 32,
    "twoBed": 32,
    "threeBed": 36,
}
CORRIDOR_FALLBACK_DEPTH = 6

# Gross square feet per unit
UNIT_SIZES_GSF = {
    "studio": 450,
    "oneBed": 650,
    "twoBed": 950,
    "threeBed": 1200,
}

# Default distribution (%) used when no target mix is given
DEFAULT_UNIT_MIX = {
    "studio": 25,
    "oneBed": 40,
    "twoBed": 30,
    "threeBed": 5,
}

# Layout types
SINGLE_LOADED = "singleLoaded"
DOUBLE_LOADED = "doubleLoaded"
WRAP = "wrap"

LOBBY_TYPES = {
    SINGLE_LOADED: {"name": "Single Loaded", "width": 8, "description": "Units on one side of corridor"},
    DOUBLE_LOADED: {"name": "Double Loaded", "width": 6, "description": "Units on both sides of corridor"},
    WRAP: {"name": "Wrap", "width": 10, "description": "Units wrap around core"},
}

CORRIDOR_WIDTHS = {
    SINGLE_LOADED: 8,
    DOUBLE_LOADED: 6,
    WRAP: 10,
}

# Cores (stairs + elevator + mechanical)
CORE_WIDTH = 24
CORE_DEPTH = 32
MIN_UNITS_PER_CORE = 30
MAX_UNITS_PER_CORE = 60

# Optimizer convergence
WIDTH_TOLERANCE_FT = 2
MAX_OPTIMIZER_ITERATIONS = 50

# Floorplan grid
DEFAULT_GRID_RESOLUTION = 2  # ft per cell

# Pairs flagged as awkward neighbours (different module depths)
ADJACENCY_MATRIX = {
    "studio": {"studio": True, "oneBed": True, "twoBed": False, "threeBed": False},
    "oneBed": {"studio": True, "oneBed": True, "twoBed": True, "threeBed": True},
    "twoBed": {"studio": False, "oneBed": True, "twoBed": True, "threeBed": True},
    "threeBed": {"studio": False, "oneBed": True, "twoBed": True, "threeBed": True},
}

# Baseline project used for cost calibration
BASE_BUILDING = {
    "floors": 5,
    "total_units": 120,
    "length": 280,
    "gsf": 78336,
    "common_area_pct": 5,
}
PODIUM_FOOTPRINT_FACTOR = 1.2

# Baseline project costs (USD) at cost factor 1.0
BASE_SITE_COST = 21567408
BASE_GC_COST = 8088967
BASE_FAB_COST = 16040830
SITE_BUILD_MONTHS = 18
MODULAR_BUILD_MONTHS = 11

# Haversine
EARTH_RADIUS_MILES = 3959

# Project configuration defaults and bounds
DEFAULT_PROJECT_NAME = "Alpine Vista Apartments"
DEFAULT_TARGETS = {"studio": 40, "oneBed": 40, "twoBed": 40, "threeBed": 0}
DEFAULT_BUILDING_LENGTH = 280
MIN_BUILDING_LENGTH = 100
MAX_BUILDING_LENGTH = 600
DEFAULT_FLOORS = 5
MIN_FLOORS = 1
MAX_FLOORS = 12
DEFAULT_COMMON_AREA_PCT = 5
DEFAULT_PODIUM_COUNT = 0
DEFAULT_COST_FACTOR = 0.87
MAX_UNITS_PER_TYPE = 200
