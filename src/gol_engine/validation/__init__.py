from .validator import BoardValidator, ValidationResult

__all__ = ['BoardValidator', 'ValidationResult']
