"""Employee and document records of the onboarding backend."""

__version__ = "0.1.0"
