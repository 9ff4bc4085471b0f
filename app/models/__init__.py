# Import all models so SQLAlchemy can resolve relationships
from app.models.database import Base  # noqa: F401
from app.models.scenario import (  # noqa: F401
    CalculationScenario,
    ScenarioInput,
    ScenarioProjection,
)
