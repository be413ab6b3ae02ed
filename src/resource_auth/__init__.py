"""resource-auth: user and session management addon for resource-oriented APIs."""

__version__ = "0.1.0"
