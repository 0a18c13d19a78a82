"""
Errors surfaced across the assistant boundary.
"""


class ClientInputError(ValueError):
    """The request carried no usable question."""
