class ClassifierUpstreamError(RuntimeError):
    """Raised when the classification service fails (timeouts, network errors, HTTP errors)."""
    pass


class ClassifierContractError(RuntimeError):
    """Raised when the classification service answers with a bad format or without a result."""
    pass
