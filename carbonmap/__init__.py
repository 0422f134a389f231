"""Carbon intensity map: polls the GB regional carbon-intensity feed and draws it."""

__version__ = "0.1.0"
