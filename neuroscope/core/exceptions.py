"""
Custom exceptions for the Neuroscope signal pipeline.

Every error raised by the processing core indicates malformed input.
None of them are transient, so callers should not retry.
"""


class NeuroscopeError(Exception):
    """Base exception for all Neuroscope errors."""
    
    def __init__(self, message: str, code: str = "NEUROSCOPE_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class EmptyInputError(NeuroscopeError):
    """Zero-length buffer where a mean or maximum is required."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="EMPTY_INPUT")


class DegenerateSignalError(NeuroscopeError):
    """Normalization divisor is zero (constant-zero signal)."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="DEGENERATE_SIGNAL")


class InvalidWindowError(NeuroscopeError):
    """Analysis window or hop size is unusable."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_WINDOW")


class InsufficientSamplesError(NeuroscopeError):
    """Buffer is shorter than the analysis requires."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="INSUFFICIENT_SAMPLES")


class ValidationError(NeuroscopeError):
    """Data validation errors."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="VALIDATION_ERROR")


class ModelError(NeuroscopeError):
    """Classifier collaborator returned an unusable prediction."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="MODEL_ERROR")
