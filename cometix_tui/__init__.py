"""State, layout and text rendering for the components of a status line configurator."""

__version__ = "1.1.2"