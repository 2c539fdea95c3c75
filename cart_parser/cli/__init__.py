from .__main__ import EXIT_FATAL, EXIT_SUCCESS, EXIT_VALIDATION_FAILED, main

__all__ = [
    "EXIT_FATAL",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_FAILED",
    "main",
]
