from __future__ import annotations

from dataclasses import dataclass

from .audit.mysql_audit_repository import MySQLAuditRepository
from .database.connection import DBConfig, DatabaseConnection
from .locations.mysql_location_repository import MySQLLocationRepository
from .locations.service import LocationService
from .personnel.mysql_employee_repository import MySQLEmployeeRepository
from .personnel.service import PersonnelService
from .reports.service import WeeklyReportService
from .shifts.locks import EmployeeLocks
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.service import ShiftService
from .snapshots.mysql_snapshot_repository import MySQLSnapshotRepository
from .snapshots.service import SnapshotService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    locations_repo: MySQLLocationRepository
    shifts_repo: MySQLShiftRepository
    snapshots_repo: MySQLSnapshotRepository
    audit_repo: MySQLAuditRepository

    personnel_service: PersonnelService
    location_service: LocationService
    shift_service: ShiftService
    snapshot_service: SnapshotService
    report_service: WeeklyReportService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    locations_repo = MySQLLocationRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)
    snapshots_repo = MySQLSnapshotRepository(conn)
    audit_repo = MySQLAuditRepository(conn)

    personnel_service = PersonnelService(employees_repo)
    location_service = LocationService(locations_repo)
    shift_service = ShiftService(shifts_repo, audit_repo, locations=locations_repo, locks=EmployeeLocks())
    snapshot_service = SnapshotService(shifts_repo, snapshots_repo, audit_repo)
    report_service = WeeklyReportService(shifts_repo, employees_repo, locations_repo, snapshots_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        locations_repo=locations_repo,
        shifts_repo=shifts_repo,
        snapshots_repo=snapshots_repo,
        audit_repo=audit_repo,
        personnel_service=personnel_service,
        location_service=location_service,
        shift_service=shift_service,
        snapshot_service=snapshot_service,
        report_service=report_service,
    )
