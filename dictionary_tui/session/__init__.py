"""Interactive session state machine."""

from .controller import SessionController, perform_lookup

__all__ = ["SessionController", "perform_lookup"]
