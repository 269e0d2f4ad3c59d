# Submodules are imported here so callers can use schemas.vehicle_schemas.X
from . import token_schemas, user_schemas, vehicle_schemas
