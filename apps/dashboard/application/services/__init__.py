# Application services
from .dashboard_widget_service import DashboardWidgetService

__all__ = ['DashboardWidgetService']
