from .settings import DEFAULT_HOURS_PER_YEAR, OrganizationSettings, Settings, get_settings

__all__ = [
    "DEFAULT_HOURS_PER_YEAR",
    "OrganizationSettings",
    "Settings",
    "get_settings",
]
