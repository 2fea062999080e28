"""gymbuddy: on-device workout routine tracker."""

__version__ = "0.2.0"
