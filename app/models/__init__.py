from app.models.log_model import Log
from app.models.beer_model import Beer

__all__ = ["Log", "Beer"]
