# -*- coding: utf-8 -*-
"""
Setup checklist widget: onboarding progress, dismissal and TUI rendering.
"""
