"""Genetics and breeding configuration constants."""

# Rarity distribution used for initial trait draws and for mutations.
# Order matters: the sampler walks it cumulatively.
RARITY_DISTRIBUTION = {
    "common": 0.60,
    "uncommon": 0.25,
    "rare": 0.10,
    "legendary": 0.05,
}

# Traits handed out to a generation-1 pet, by trait type.
# Skills are bought in the marketplace, never rolled.
INITIAL_TRAIT_COUNTS = {
    "visual": 4,
    "personality": 3,
    "skill": 0,
}

PERSONALITY_MIN = 0
PERSONALITY_MAX = 100

# Breeding
MUTATION_CHANCE = 0.15  # Per inherited trait slot
PERSONALITY_VARIANCE = 15  # Offspring attribute = parent mean +/- this
BREEDING_MIN_AGE_DAYS = 7
BREEDING_MIN_HEALTH = 50  # Strictly greater than this is required
BREEDING_COOLDOWN_DAYS = 7
MAX_PETS_PER_OWNER = 10
