"""Exceptions raised by the feature switch helper."""


class FeatureSwitchError(RuntimeError):
    """Base class for every feature switch failure."""


class AlreadyInitializedError(FeatureSwitchError):
    def __init__(self):
        super().__init__("FeatureSwitchHelper has already been initialized.")


class NotInitializedError(FeatureSwitchError):
    def __init__(self):
        super().__init__(
            "FeatureSwitchHelper is not initialized. "
            "Please call feature_switch.init() first."
        )


class ValidationError(FeatureSwitchError, ValueError):
    """Raw configuration could not be coerced into a FeatureSwitchConfiguration."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class UndefinedFeatureError(FeatureSwitchError, LookupError):
    def __init__(self, feature_name: str):
        super().__init__(
            f'Feature "{feature_name}" is not defined in the feature switch configuration.'
        )
        self.feature_name = feature_name


class ConfigFileError(FeatureSwitchError):
    pass
