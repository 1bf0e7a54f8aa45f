"""Core runtime support for the projectenv application package."""
