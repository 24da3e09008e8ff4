from farmtrack.infrastructure.db.orm import (  # noqa: F401
    account_settings,
    animal,
    health_record,
    insemination,
    milk_production,
    notification_log,
    pregnancy_reminder,
    profile,
    transaction,
    vaccination,
)
