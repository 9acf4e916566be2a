"""Router error classes.

Calculator errors propagate unchanged through pools to routers. Routers
treat a failure of one candidate as local and only raise NoRouteFound
once every candidate has failed.
"""


class RouterError(Exception):
    """Base error for routing operations."""

    pass


class InvalidReserves(RouterError):
    """A pool has a zero reserve on the side being priced."""

    pass


class MathOverflow(RouterError):
    """An arithmetic step or narrowing conversion exceeds the representable range."""

    pass


class InsufficientLiquidity(RouterError):
    """Requested amount exceeds a liquidity ceiling or drains a reserve."""

    pass


class NoRouteFound(RouterError):
    """No topology connects the source to the destination within constraints."""

    pass


class ConfigError(RouterError):
    """A caller-supplied parameter is outside its valid domain."""

    pass


class PoolParseError(RouterError):
    """Snapshot data cannot be turned into a pool."""

    pass


class TransactionError(RouterError):
    """The executor cannot perform the requested execution."""

    pass
