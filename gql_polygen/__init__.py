"""Generate Kotlin, Swift and Dart types from GraphQL schemas."""

__version__ = "0.1.0"
