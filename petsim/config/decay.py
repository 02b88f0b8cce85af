"""Stat decay, neglect and recovery configuration constants.

All rates are points per hour on the 0-100 stat scale.
"""

# Calls closer together than this leave the stats untouched
MIN_UPDATE_INTERVAL_HOURS = 1.0 / 60.0

HUNGER_INCREASE_PER_HOUR = 1.0
HAPPINESS_DECAY_PER_HOUR = 0.5
ENERGY_DECAY_PER_HOUR = 0.3  # Awake
ENERGY_RECOVERY_PER_HOUR = 5.0  # Asleep
HEALTH_DECAY_PER_HOUR = 2.0  # Only while starving

STARVATION_HUNGER_THRESHOLD = 80  # Health drops while hunger is above this

# Sleep window in local hours, [start, end)
SLEEP_START_HOUR = 0
SLEEP_END_HOUR = 6

# Neglect: hunger above or happiness below these marks the pet as neglected
NEGLECT_HUNGER_THRESHOLD = 50
NEGLECT_HAPPINESS_THRESHOLD = 50

# First hours of a neglect episode decay at a reduced rate
GRACE_PERIOD_HOURS = 24.0
GRACE_PERIOD_MULTIPLIER = 0.5

# Recovery from critical state
RECOVERY_HEALTH_RESTORE = 50
RECOVERY_PENALTY_PERCENT = 10  # Max health lost per recovery
MAX_HEALTH_PENALTY = 100

# Warnings
HUNGER_WARNING_THRESHOLD = 80
HEALTH_WARNING_THRESHOLD = 30
HEALTH_CRITICAL_WARNING_THRESHOLD = 20
SICK_HEALTH_THRESHOLD = 40

# Background stat job
STAT_UPDATE_INTERVAL_SECONDS = 15 * 60
