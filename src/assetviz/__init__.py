"""assetviz — render domain inventories as browsable mind-map reports."""

__version__ = "1.0.0"
