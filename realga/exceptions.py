class RealGAError(Exception):
    """Base for all realga exceptions."""

    pass


class InvalidSettingsError(RealGAError, ValueError):
    """Run settings that cannot drive a generation loop."""

    pass


class PopulationSizeError(RealGAError):
    """A population whose length differs from the configured size."""

    pass


class EmptySelectionPoolError(RealGAError):
    """No individual is eligible to be drawn as a parent."""

    pass
