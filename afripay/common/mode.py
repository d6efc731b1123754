"""Sandbox/production mode and the per-provider amount policy."""

from enum import Enum


class Mode(str, Enum):
    SANDBOX = "test"
    PRODUCTION = "prod"

    @classmethod
    def _missing_(cls, value):
        aliases = {
            "test": cls.SANDBOX,
            "prod": cls.PRODUCTION,
            "sandbox": cls.SANDBOX,
            "dev": cls.SANDBOX,
            "production": cls.PRODUCTION,
            "live": cls.PRODUCTION,
        }
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None


def charge_amount(mode: Mode, amount: int, sandbox_amount: int | None) -> int:
    """Return the amount actually sent upstream.

    Sandbox calls of providers that declare a nominal amount never charge the
    caller's amount. Production always charges it unchanged.
    """

    if mode is Mode.SANDBOX and sandbox_amount is not None:
        return sandbox_amount
    return amount
