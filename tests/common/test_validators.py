import pytest

from turnos_system.common.validators import require_hhmm, require_non_empty, require_positive_id, require_time_order
from turnos_system.core.exceptions import ValidationError


def test_require_hhmm_normalises_padding():
    assert require_hhmm("9:05", "Hora") == "09:05"


def test_require_hhmm_rejects_garbage():
    with pytest.raises(ValidationError):
        require_hhmm("9am", "Hora")


def test_start_must_be_before_end():
    require_time_order("09:00", "09:01")
    with pytest.raises(ValidationError):
        require_time_order("13:00", "13:00")
    with pytest.raises(ValidationError):
        require_time_order("18:00", "09:00")


def test_require_non_empty_and_positive_id():
    assert require_non_empty("  Ana ", "Nombre") == "Ana"
    with pytest.raises(ValidationError):
        require_non_empty("   ", "Nombre")
    assert require_positive_id("3", "Empleado") == 3
    with pytest.raises(ValidationError):
        require_positive_id(0, "Empleado")
    with pytest.raises(ValidationError):
        require_positive_id(None, "Empleado")
