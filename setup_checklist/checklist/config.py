# -*- coding: utf-8 -*-
"""
Configuration constants for the checklist module.
"""

# Persistence contract: one key, one sentinel. The web client stores
# JSON-encoded values, so a dismissed flag reads back as the string "true".
DISMISSAL_STORAGE_KEY: str = "setup-checklist-dismissed"
DISMISSED_SENTINEL: str = "true"

# Backend endpoint serving the user's onboarding steps
CHECKLIST_ENDPOINT: str = "/api/onboarding/checklist"

# Default onboarding steps, in display order.
# Each step has: id, title (display name), href (dashboard route)
DEFAULT_SETUP_STEPS = [
    {"id": "targeting", "title": "Set your targeting preferences", "href": "/dashboard/settings/targeting"},
    {"id": "pixel", "title": "Install your website visitor pixel", "href": "/dashboard/pixel"},
    {"id": "leads", "title": "Get your first enriched leads", "href": "/dashboard/my-leads"},
]
