"""Example: using the service layer without Flask.

Adds a person, marks a few Sundays and prints the follow-up list.
"""

from class_attendance.container import build_container
from class_attendance.main import load_settings


def main():
    container = build_container(settings=load_settings())
    container.store.start()

    person = container.roster_service.add_person("logos", "Ana Pérez", "+506 8888-8888")
    for sunday, present in (("2025-08-03", True), ("2025-08-10", False), ("2025-08-17", False), ("2025-08-24", False)):
        container.attendance_service.set_presence(sunday, "logos", person.id, present)

    for m in container.statistics_service.people():
        flag = "ALERT" if m.dropout_alert else ""
        print(f"{m.name:<20} {m.class_name:<12} {m.attendance_percentage:>3}% streak={m.current_absent_streak} {flag}")

    container.store.flush()
    container.store.close()


if __name__ == "__main__":
    main()
