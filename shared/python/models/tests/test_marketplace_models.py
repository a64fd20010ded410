"""Tests for equipment and manpower profile models."""
from sqlalchemy import inspect


def test_equipment_table_exists(db_session):
    """Verify equipment table has the columns search relies on."""
    inspector = inspect(db_session.bind)
    columns = {c['name'] for c in inspector.get_columns('equipment')}

    required = {'id', 'user_id', 'equipment_name', 'equipment_type', 'availability',
                'location', 'description', 'equipment_images', 'is_active', 'created_at'}
    assert required.issubset(columns), f"Missing columns: {required - columns}"


def test_manpower_profiles_table_exists(db_session):
    """Verify manpower_profiles table has the columns search relies on."""
    inspector = inspect(db_session.bind)
    columns = {c['name'] for c in inspector.get_columns('manpower_profiles')}

    required = {'id', 'first_name', 'last_name', 'location', 'job_title',
                'availability_status', 'profile_description', 'certificates',
                'cv_path', 'created_at'}
    assert required.issubset(columns), f"Missing columns: {required - columns}"


def test_models_import():
    """Verify models can be imported."""
    from models.equipment import Equipment, EquipmentAvailability
    from models.manpower_profile import ManpowerProfile, ManpowerAvailability

    assert Equipment.__tablename__ == 'equipment'
    assert ManpowerProfile.__tablename__ == 'manpower_profiles'
    assert {a.value for a in EquipmentAvailability} == {'available', 'on-hire'}
    assert {a.value for a in ManpowerAvailability} == {'available', 'busy'}


def test_equipment_defaults(db_session):
    """New listings default to active and available."""
    from models.equipment import Equipment

    item = Equipment(
        user_id=1,
        equipment_name="Crawler Crane",
        equipment_type="Crane",
        contact_person="R. Kumar",
        contact_number="9800000000",
        contact_email="owner@example.com",
    )
    db_session.add(item)
    db_session.flush()

    assert item.is_active is True
    assert item.availability == 'available'
    assert item.created_at is not None
