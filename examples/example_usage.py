"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the roster rules live in the service and reducer.
"""

import importlib

from config import get_settings_module

from src.roster_manager.roster_manager.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(seed_demo_roster=settings.SEED_DEMO_ROSTER)
    service = container.roster_service

    service.add_student("Frank Osei")
    service.mark_all("Present")
    service.toggle_student(2)
    print(service.counts())
    print(service.export_csv())

    service.import_csv("7,Grace,Present\nHenry,Absent")
    print([s.to_dict() for s in service.list_students()])


if __name__ == "__main__":
    main()
