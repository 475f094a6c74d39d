"""Volunteer Hub core.

Event approval, registration capacity and credential lifecycles for a
volunteer event platform. The presentation layer lives elsewhere and calls
the application services in ``volunteer_hub.application.services``.
"""

__version__ = "0.1.0"
