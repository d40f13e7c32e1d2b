from .auth_controller import AuthController
from .dashboard_controller import DashboardController
from .misc_controller import MiscController

__all__ = ["AuthController", "DashboardController", "MiscController"]
