from courtplan.controllers.roster_manager import RosterManager
from courtplan.controllers.session_form import SessionForm

__all__ = [
    "RosterManager",
    "SessionForm",
]
