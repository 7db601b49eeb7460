class DomainError(Exception):
    pass


class RepositoryError(DomainError):
    pass


class CatalogFetchError(RepositoryError):
    pass


class NotificationError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass
