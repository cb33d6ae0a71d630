from __future__ import annotations

from dataclasses import dataclass

from .activities.service import ActivityService
from .activities.sql_activity_repository import SQLActivityRepository
from .admins.service import AdminAuthService
from .admins.sql_admin_repository import SQLAdminRepository
from .dashboard.service import DashboardService
from .dashboard.sql_dashboard_repository import SQLDashboardRepository
from .database.connection import DBConfig, DatabaseConnection
from .health.service import HealthService
from .health.sql_health_repository import SQLHealthRepository
from .students.service import StudentAuthService
from .students.sql_student_repository import SQLStudentRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    students_repo: SQLStudentRepository
    admins_repo: SQLAdminRepository
    activities_repo: SQLActivityRepository
    health_repo: SQLHealthRepository
    dashboard_repo: SQLDashboardRepository

    student_auth_service: StudentAuthService
    admin_auth_service: AdminAuthService
    activity_service: ActivityService
    health_service: HealthService
    dashboard_service: DashboardService


def build_container(*, database_url: str, strict_activity_updates: bool = False, echo_sql: bool = False) -> Container:
    conn = DatabaseConnection(DBConfig(url=database_url, echo=echo_sql))

    students_repo = SQLStudentRepository(conn)
    admins_repo = SQLAdminRepository(conn)
    activities_repo = SQLActivityRepository(conn)
    health_repo = SQLHealthRepository(conn)
    dashboard_repo = SQLDashboardRepository(conn)

    return Container(
        conn=conn,
        students_repo=students_repo,
        admins_repo=admins_repo,
        activities_repo=activities_repo,
        health_repo=health_repo,
        dashboard_repo=dashboard_repo,
        student_auth_service=StudentAuthService(students_repo),
        admin_auth_service=AdminAuthService(admins_repo),
        activity_service=ActivityService(activities_repo, strict_updates=strict_activity_updates),
        health_service=HealthService(health_repo),
        dashboard_service=DashboardService(dashboard_repo, students_repo),
    )
