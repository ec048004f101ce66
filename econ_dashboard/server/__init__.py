"""HTTP delivery of the report and static assets."""

from econ_dashboard.server.app import CONTENT_TYPES, content_type_for, create_app
from econ_dashboard.server.report_holder import ReportHolder

__all__ = ["CONTENT_TYPES", "ReportHolder", "content_type_for", "create_app"]
