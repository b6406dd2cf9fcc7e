"""Exceptions raised by model adapters."""


class ModelAdapterError(Exception):
    """Base class for model adapter errors."""


class UnknownAttributeError(ModelAdapterError):
    """Raised when an attribute is not a mapped field or association of a model.

    Attributes:
        model (str): The model type name.
        attribute (str): The attribute that was requested.
    """

    def __init__(self, model: str, attribute: str):
        super().__init__(f"Model '{model}' has no attribute '{attribute}'.")
        self.model = model
        self.attribute = attribute


class NoAdapterError(ModelAdapterError):
    """Raised when no adapter can wrap a subject.

    Attributes:
        subject_type (str): The type name of the subject that could not be adapted.
    """

    def __init__(self, subject_type: str):
        super().__init__(
            f"No model adapter registered for objects of type '{subject_type}'."
        )
        self.subject_type = subject_type
