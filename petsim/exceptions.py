"""petsim exception hierarchy.

Expected domain conditions (empty trait pools, zero-hour windows, pets that
are already critical) never raise. These types cover caller misuse and
misconfiguration only, so callers can catch narrowly.
"""


class PetSimError(Exception):
    """Root of all petsim domain exceptions."""


class GeneticsError(PetSimError, ValueError):
    """Malformed genetics data, such as a trait catalog with duplicate ids."""


class InvalidSnapshotError(PetSimError, ValueError):
    """A pet snapshot or decay input violates the engine's preconditions.

    Raised for stats outside [0, 100], a generation below 1, duplicate trait
    associations or a ``last_update`` that lies in the future.
    """


class PetNotFoundError(PetSimError, LookupError):
    """A pet id could not be resolved by the pet store."""


class ConfigurationError(PetSimError):
    """Invalid or missing configuration."""
