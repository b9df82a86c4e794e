# -*- coding: utf-8 -*-
"""
setup_checklist.main

Starts the checklist TUI. Environment variables (or a .env file) select
the backend and the storage file; without CHECKLIST_API_URL the default
onboarding steps are served locally.

Run from the project root with 'python -m setup_checklist.main'
"""

from dotenv import load_dotenv

load_dotenv()

from setup_checklist import config
from setup_checklist.checklist.dismissal import DismissalStore, JsonFileStorage
from setup_checklist.checklist.provider import (
    ChecklistProvider,
    HttpChecklistProvider,
    StaticChecklistProvider,
)
from setup_checklist.logger import define_log_level, logger
from setup_checklist.tui.app import ChecklistApp


def build_provider() -> ChecklistProvider:
    api_url = config.get_api_url()
    if api_url is None:
        logger.info("[CHECKLIST] CHECKLIST_API_URL not set, serving default setup steps")
        return StaticChecklistProvider()
    return HttpChecklistProvider(
        api_url,
        user_id=config.get_user_id(),
        token=config.get_api_token(),
        timeout=config.get_api_timeout(),
    )


def build_store() -> DismissalStore:
    return DismissalStore(JsonFileStorage(config.get_storage_file()))


def main() -> None:
    define_log_level(logfile_level=config.get_log_level(), name="checklist")
    app = ChecklistApp(build_provider(), build_store())
    app.run()


if __name__ == "__main__":
    main()
