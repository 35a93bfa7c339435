"""Error types raised by the freedom voting engine."""


class FreecheckError(Exception):
    """Base class for errors reported to callers."""


class RegistryConfigurationError(FreecheckError):
    """A reference repository carries a rule the engine cannot evaluate."""


class UnsupportedInputError(FreecheckError, TypeError):
    """check_freedom() received something that is neither a package nor a project."""


class LicenseGroupsUnavailable(FreecheckError):
    """The free license identifier list could not be obtained."""
