"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the use cases live in the services built by the container.
"""

from prana_tracker.container import build_container
from prana_tracker.database.bootstrap import apply_schema, ensure_demo_data


def main():
    container = build_container(database_url="sqlite://")
    apply_schema(container.conn)
    ensure_demo_data(container.conn)

    student = container.student_auth_service.login("23144003", "password123")
    print("Logged in:", student["name"])

    for activity in container.activity_service.list_activities("23144003"):
        print(f"  {activity['activity_time']:<20} {activity['activity_name']:<15} {activity['status']}")

    container.health_service.upsert_health(scholar_id="23144003", status="Good", notes="Slept well")
    print("Health today:", container.health_service.get_health("23144003"))
    print("Stats:", container.dashboard_service.get_stats().to_dict())


if __name__ == "__main__":
    main()
