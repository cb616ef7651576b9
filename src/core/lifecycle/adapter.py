# Standard Library
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

# Local Modules
from core.lifecycle.models import LifecycleResult


class ExternalResourceAdapter(ABC):
    """Manages a resource that lives outside CloudFormation.

    Implementations receive their clients through the constructor and keep
    no state between calls. ``update`` and ``delete`` are always given the
    physical id a previous ``create`` returned.
    """

    @abstractmethod
    def create(self, properties: Dict[str, Any]) -> LifecycleResult:
        """Create the external resource."""

    @abstractmethod
    def update(
        self, physical_id: str, properties: Dict[str, Any]
    ) -> LifecycleResult:
        """Update the external resource identified by ``physical_id``."""

    @abstractmethod
    def delete(
        self, physical_id: str, properties: Optional[Dict[str, Any]] = None
    ) -> None:
        """Delete the external resource; an absent resource is not an error."""
