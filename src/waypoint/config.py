"""Core configuration.

CoreConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass, field

from waypoint._internal.identity import IdentitySource, default_identity
from waypoint.routing.params import CoercionPolicy


@dataclass(frozen=True, slots=True)
class CoreConfig:
    """Defaults for the route-modeling operations. Immutable after creation.

    Override what you need::

        config = CoreConfig(coercion=CoercionPolicy(allow_leading_zeros=True))
        build_config(prefab, identity=config.identity)
    """

    # Identity source for new route configs (shared process-wide by default)
    identity: IdentitySource = field(default_factory=default_identity)

    # Numeric coercion of path parameters
    coercion: CoercionPolicy = field(default_factory=CoercionPolicy)

    # CLI logging
    log_level: str = "warning"


DEFAULT_CONFIG = CoreConfig()
