"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
DAYS_PER_WEEK = 7

DEFAULT_AUDIT_LIMIT = 100

UNKNOWN_LOCATION_LABEL = "otro local"
DELETED_EMPLOYEE_LABEL = "Empleado eliminado"
DELETED_LOCATION_LABEL = "Local eliminado"
