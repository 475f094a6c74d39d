"""Domain value objects package."""

from volunteer_hub.domain.value_objects.actor import Actor
from volunteer_hub.domain.value_objects.email import Email
from volunteer_hub.domain.value_objects.pagination import Page, PageRequest
from volunteer_hub.domain.value_objects.password import Password

__all__ = ["Actor", "Email", "Page", "PageRequest", "Password"]
