class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass


class UpstreamExtractionError(DomainError):
    pass


class UpstreamSearchError(DomainError):
    pass
