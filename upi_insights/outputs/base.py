# upi_insights/outputs/base.py
from abc import ABC, abstractmethod

class BaseOutput(ABC):
    @abstractmethod
    def render(self, dashboard):
        """Render a dashboard view model (see upi_insights.view)."""
        pass
